import pytest

from apigate.aws.api_gateway.naming import (
    api_key_logical_id,
    endpoint_output_id,
    extract_resource_index,
    method_logical_id,
    normalize_method,
    permission_logical_id,
)
from apigate.exceptions import MalformedIdentifier


@pytest.mark.parametrize(
    ("method", "expected"),
    [
        ("GET", "Get"),
        ("get", "Get"),
        ("pOST", "Post"),
        ("Delete", "Delete"),
        ("OPTIONS", "Options"),
        ("any", "Any"),
    ],
)
def test_normalize_method(method, expected):
    assert normalize_method(method) == expected


@pytest.mark.parametrize(
    ("logical_id", "expected"),
    [
        ("ResourceApigEvent5", "5"),
        ("ResourceApigEvent12", "12"),
        ("ResourceApigEvent0", "0"),
        ("Resource2ApigEvent34", "34"),
    ],
)
def test_extract_resource_index(logical_id, expected):
    assert extract_resource_index(logical_id) == expected


@pytest.mark.parametrize("logical_id", ["ResourceApigEvent", "", "Resource5ApigEvent"])
def test_extract_resource_index_without_digits(logical_id):
    with pytest.raises(MalformedIdentifier, match="does not end with a numeric suffix") as exc:
        extract_resource_index(logical_id, "users/create")

    assert exc.value.path == "users/create"
    assert exc.value.logical_id == logical_id


@pytest.mark.parametrize(
    ("method", "resource_logical_id", "expected"),
    [
        ("POST", "ResourceApigEvent5", "PostMethodApigEvent5"),
        ("get", "ResourceApigEvent12", "GetMethodApigEvent12"),
        ("dElEtE", "ResourceApigEvent7", "DeleteMethodApigEvent7"),
    ],
)
def test_method_logical_id(method, resource_logical_id, expected):
    assert method_logical_id(method, resource_logical_id) == expected


def test_other_logical_ids():
    assert api_key_logical_id(0) == "ApiKeyApigEvent0"
    assert endpoint_output_id(3) == "Endpoint3"
    assert permission_logical_id("first") == "firstLambdaPermissionApigEvent"
