import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, TypedDict

from apigate.exceptions import InvalidConfigShape

_STAGE_NAME_PATTERN = re.compile(r"^[a-zA-Z0-9_-]+$")


class ProviderConfigDict(TypedDict, total=False):
    stage: str
    region: str
    apiKeys: list[str]


@dataclass(frozen=True, kw_only=True)
class ProviderConfig:
    """Provider level settings of a service.

    `api_keys` is kept exactly as declared. Its shape is validated when the API keys
    are compiled.
    """

    stage: str
    region: str
    api_keys: Any = None

    def __post_init__(self) -> None:
        if not isinstance(self.stage, str) or not self.stage:
            raise InvalidConfigShape("Stage name cannot be empty")
        if not _STAGE_NAME_PATTERN.match(self.stage):
            raise InvalidConfigShape(
                "Stage name can only contain alphanumeric characters, hyphens, and underscores"
            )
        if not isinstance(self.region, str) or not self.region.strip():
            raise InvalidConfigShape("Region cannot be empty")


@dataclass(frozen=True)
class FunctionDefinition:
    """A function of the service and the events declared for it, in manifest order."""

    name: str
    events: tuple[dict, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise InvalidConfigShape("Function name cannot be empty")


@dataclass(frozen=True, kw_only=True)
class ServiceDefinition:
    service: str
    provider: ProviderConfig
    functions: tuple[FunctionDefinition, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.service, str) or not self.service.strip():
            raise InvalidConfigShape("Service name cannot be empty")

    @classmethod
    def from_dict(
        cls,
        manifest: Mapping[str, Any],
        stage: str | None = None,
        region: str | None = None,
    ) -> "ServiceDefinition":
        """Build a service definition from an already parsed manifest.

        Stage and region given as arguments take precedence over the provider section.
        """
        if not isinstance(manifest, Mapping):
            raise InvalidConfigShape("Manifest must be an object")

        provider: ProviderConfigDict = manifest.get("provider") or {}
        if not isinstance(provider, Mapping):
            raise InvalidConfigShape("provider property must be an object")

        functions = manifest.get("functions") or {}
        if not isinstance(functions, Mapping):
            raise InvalidConfigShape("functions property must be an object")

        return cls(
            service=manifest.get("service"),
            provider=ProviderConfig(
                stage=stage or provider.get("stage"),
                region=region or provider.get("region"),
                api_keys=provider.get("apiKeys"),
            ),
            functions=tuple(
                _parse_function(name, definition) for name, definition in functions.items()
            ),
        )


def _parse_function(name: str, definition: Any) -> FunctionDefinition:
    if definition is None:
        return FunctionDefinition(name)
    if not isinstance(definition, Mapping):
        raise InvalidConfigShape(f"Function {name} must be an object")

    events = definition.get("events") or []
    if not isinstance(events, list):
        raise InvalidConfigShape(f"events property of function {name} must be an array")
    for event in events:
        if not isinstance(event, Mapping):
            raise InvalidConfigShape(f"Each event of function {name} must be an object")
    return FunctionDefinition(name, tuple(events))
