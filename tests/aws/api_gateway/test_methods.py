import pytest

from apigate.aws.api_gateway import parse_http_event
from apigate.aws.api_gateway.constants import DEFAULT_JSON_REQUEST_TEMPLATE
from apigate.aws.api_gateway.methods import build_method
from apigate.exceptions import MalformedIdentifier

AUTHORIZER_ARN = "arn:aws:lambda:us-east-1:123456789012:function:service-dev-CustomAuth"


def _build(http, resource_logical_id="ResourceApigEvent5", function_name="first"):
    return build_method(parse_http_event(function_name, http), resource_logical_id)


def test_method_resource():
    logical_id, method = _build({"method": "post", "path": "users/create"})

    assert logical_id == "PostMethodApigEvent5"
    assert method["Type"] == "AWS::ApiGateway::Method"
    assert "DependsOn" not in method

    properties = method["Properties"]
    assert properties["HttpMethod"] == "POST"
    assert properties["AuthorizationType"] == "NONE"
    assert "AuthorizerId" not in properties
    assert "ApiKeyRequired" not in properties
    assert properties["ResourceId"] == {"Ref": "ResourceApigEvent5"}
    assert properties["RestApiId"] == {"Ref": "RestApiApigEvent"}
    assert properties["RequestParameters"] == {}
    assert properties["MethodResponses"] == [
        {"ResponseModels": {}, "ResponseParameters": {}, "StatusCode": "200"}
    ]


@pytest.mark.parametrize("method", ["GET", "put", "Delete", "PATCH", "OPTIONS"])
def test_integration_always_invokes_function_with_post(method):
    _, resource = _build({"method": method, "path": "users/create"}, function_name="second")
    integration = resource["Properties"]["Integration"]

    assert resource["Properties"]["HttpMethod"] == method.upper()
    assert integration["IntegrationHttpMethod"] == "POST"
    assert integration["Type"] == "AWS"
    assert integration["Uri"] == {
        "Fn::Join": [
            "",
            [
                "arn:aws:apigateway:",
                {"Ref": "AWS::Region"},
                ":lambda:path/2015-03-31/functions/",
                {"Fn::GetAtt": ["second", "Arn"]},
                "/invocations",
            ],
        ]
    }


def test_request_and_response_templates():
    _, resource = _build("GET users/list")
    integration = resource["Properties"]["Integration"]

    assert integration["RequestTemplates"] == {"application/json": DEFAULT_JSON_REQUEST_TEMPLATE}
    assert integration["IntegrationResponses"] == [
        {
            "StatusCode": "200",
            "ResponseParameters": {},
            "ResponseTemplates": {"application/json": ""},
        }
    ]


def test_request_template_exposes_normalized_event():
    for key in (
        '"body"',
        '"method"',
        '"principalId"',
        '"headers"',
        '"query"',
        '"path"',
        '"identity"',
        '"stageVariables"',
    ):
        assert key in DEFAULT_JSON_REQUEST_TEMPLATE


@pytest.mark.parametrize(
    "authorizer",
    [
        "CustomAuth",
        AUTHORIZER_ARN,
        {"arn": AUTHORIZER_ARN},
        {"name": "CustomAuth"},
    ],
)
def test_authorized_method(authorizer):
    _, resource = _build({"method": "GET", "path": "users/list", "authorizer": authorizer})

    assert resource["Properties"]["AuthorizationType"] == "CUSTOM"
    assert resource["Properties"]["AuthorizerId"] == {"Ref": "CustomAuthAuthorizer"}
    assert resource["DependsOn"] == "CustomAuthAuthorizer"


def test_authorizer_object_without_arn_or_name_is_not_authorized():
    _, resource = _build({"method": "GET", "path": "users/list", "authorizer": {}})

    assert resource["Properties"]["AuthorizationType"] == "NONE"
    assert "AuthorizerId" not in resource["Properties"]
    assert "DependsOn" not in resource


@pytest.mark.parametrize("authorizer", [None, "CustomAuth"])
def test_private_method_requires_api_key(authorizer):
    _, resource = _build(
        {"method": "GET", "path": "users/list", "private": True, "authorizer": authorizer}
    )

    assert resource["Properties"]["ApiKeyRequired"] is True


def test_malformed_route_resource_id():
    with pytest.raises(MalformedIdentifier, match="users/create"):
        _build("POST users/create", resource_logical_id="ResourceApigEvent")


def test_methods_do_not_share_documents():
    _, first = _build("GET users/list")
    _, second = _build("GET users/list")

    first["Properties"]["Integration"]["IntegrationResponses"][0]["StatusCode"] = "500"

    assert second["Properties"]["Integration"]["IntegrationResponses"][0]["StatusCode"] == "200"
