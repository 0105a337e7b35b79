"""Resolution of the authorizer declared on an HTTP event.

An authorizer can be declared in three ways:

    authorizer: myAuth                                         # name
    authorizer: arn:aws:lambda:...:function:service-dev-myAuth   # qualified function reference
    authorizer: {arn: ..., name: ...}                          # object

Each shape is parsed into its own variant and resolved to the name used for the
authorizer logical id ('<name>Authorizer').
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, TypeAlias

from apigate.aws.api_gateway.constants import AUTHORIZER_LOGICAL_ID_SUFFIX
from apigate.exceptions import InvalidEventShape

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NamedAuthorizer:
    name: str


@dataclass(frozen=True)
class QualifiedAuthorizer:
    arn: str


@dataclass(frozen=True)
class ObjectAuthorizer:
    arn: str | None = None
    name: str | None = None


AuthorizerReference: TypeAlias = NamedAuthorizer | QualifiedAuthorizer | ObjectAuthorizer


def parse_authorizer(raw: Any, function_name: str = "") -> AuthorizerReference | None:
    """Turn the declared authorizer value into an AuthorizerReference.

    Returns None when no authorizer is declared (missing or empty string).
    """
    if raw is None or raw == "":
        return None
    if isinstance(raw, str):
        if ":" in raw:
            return QualifiedAuthorizer(raw)
        return NamedAuthorizer(raw)
    if isinstance(raw, Mapping):
        arn = raw.get("arn")
        name = raw.get("name")
        for field_name, value in (("arn", arn), ("name", name)):
            if value is not None and not isinstance(value, str):
                raise InvalidEventShape(
                    function_name,
                    f"Authorizer {field_name} of function {function_name} must be a string, "
                    f"got {type(value).__name__}",
                )
        return ObjectAuthorizer(arn=arn or None, name=name or None)
    raise InvalidEventShape(
        function_name,
        f"Authorizer of function {function_name} must be a name, an ARN or an object "
        f"with 'arn' or 'name', got {type(raw).__name__}",
    )


def name_from_function_arn(arn: str) -> str:
    """Extract the authorizer name from a function ARN.

    Takes the last ':' separated segment and returns its last '-' separated part,
    which assumes functions are named '<service>-<stage>-<name>'. Names that contain
    hyphens themselves resolve to their last part only.

    Example: 'arn:aws:lambda:us-east-1:123:function:service-dev-CustomAuth' -> 'CustomAuth'
    """
    function_part = arn.split(":")[-1]
    return function_part.split("-")[-1]


def resolve_authorizer_name(reference: AuthorizerReference | None) -> str | None:
    if reference is None:
        return None
    if isinstance(reference, NamedAuthorizer):
        return reference.name
    if isinstance(reference, QualifiedAuthorizer):
        return name_from_function_arn(reference.arn)
    if reference.arn:
        return name_from_function_arn(reference.arn)
    if reference.name:
        return reference.name

    # Kept as "no authorizer" for compatibility with existing manifests.
    logger.warning(
        "Authorizer object has neither 'arn' nor 'name', the method will not be authorized"
    )
    return None


def authorizer_logical_id(name: str) -> str:
    return f"{name}{AUTHORIZER_LOGICAL_ID_SUFFIX}"
