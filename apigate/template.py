import copy
import json
from typing import Any

from apigate.exceptions import ResourceConflict


def _merge(existing: Any, incoming: Any) -> Any:
    if isinstance(existing, dict) and isinstance(incoming, dict):
        merged = dict(existing)
        for key, value in incoming.items():
            merged[key] = _merge(existing.get(key), value)
        return merged
    return copy.deepcopy(incoming)


def merge_resources(target: dict[str, Any], fragment: dict[str, dict]) -> None:
    """Deep merge a fragment of resources (or outputs) into target, in place.

    Unrelated keys in target are kept. For keys present on both sides, nested mappings
    are merged and values from the fragment win. An existing resource is never replaced
    by one of a different type.
    """
    for logical_id, definition in fragment.items():
        existing = target.get(logical_id)
        if isinstance(existing, dict) and isinstance(definition, dict):
            existing_type = existing.get("Type")
            new_type = definition.get("Type")
            if existing_type is not None and new_type is not None and existing_type != new_type:
                raise ResourceConflict(logical_id, existing_type, new_type)

    for logical_id, definition in fragment.items():
        target[logical_id] = _merge(target.get(logical_id), definition)


class Template:
    """Resources and Outputs sections of a CloudFormation template.

    Wraps a caller-owned template dict when one is given. The compiler only adds
    entries to it, it never removes any.
    """

    def __init__(self, document: dict[str, Any] | None = None) -> None:
        self._document = document if document is not None else {}
        # An empty section ("Outputs:" in YAML) is loaded as None
        for section in ("Resources", "Outputs"):
            if self._document.get(section) is None:
                self._document[section] = {}

    @property
    def document(self) -> dict[str, Any]:
        return self._document

    @property
    def resources(self) -> dict[str, dict]:
        return self._document["Resources"]

    @property
    def outputs(self) -> dict[str, dict]:
        return self._document["Outputs"]

    def add_resources(self, fragment: dict[str, dict]) -> None:
        merge_resources(self.resources, fragment)

    def add_outputs(self, fragment: dict[str, dict]) -> None:
        merge_resources(self.outputs, fragment)

    def to_json(self, indent: int | None = 2) -> str:
        return json.dumps(self._document, indent=indent, sort_keys=True)
