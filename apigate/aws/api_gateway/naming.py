import re

from apigate.aws.api_gateway.constants import (
    API_KEY_LOGICAL_ID_PREFIX,
    ENDPOINT_OUTPUT_PREFIX,
    METHOD_LOGICAL_ID_INFIX,
    PERMISSION_LOGICAL_ID_SUFFIX,
)
from apigate.exceptions import MalformedIdentifier

_TRAILING_DIGITS = re.compile(r"\d+$")


def normalize_method(method: str) -> str:
    """Capitalize an HTTP method for use in logical ids, e.g. 'pOST' -> 'Post'."""
    return method[:1].upper() + method[1:].lower()


def extract_resource_index(resource_logical_id: str, path: str = "") -> str:
    """Return the trailing digit run of a route resource logical id.

    Example: 'ResourceApigEvent12' -> '12'
    """
    match = _TRAILING_DIGITS.search(resource_logical_id)
    if match is None:
        raise MalformedIdentifier(path, resource_logical_id)
    return match.group(0)


def method_logical_id(method: str, resource_logical_id: str, path: str = "") -> str:
    index = extract_resource_index(resource_logical_id, path)
    return f"{normalize_method(method)}{METHOD_LOGICAL_ID_INFIX}{index}"


def api_key_logical_id(index: int) -> str:
    return f"{API_KEY_LOGICAL_ID_PREFIX}{index}"


def endpoint_output_id(counter: int) -> str:
    return f"{ENDPOINT_OUTPUT_PREFIX}{counter}"


def permission_logical_id(function_name: str) -> str:
    return f"{function_name}{PERMISSION_LOGICAL_ID_SUFFIX}"
