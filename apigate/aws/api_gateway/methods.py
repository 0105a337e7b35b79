import logging

from apigate.aws.api_gateway.authorizer import authorizer_logical_id
from apigate.aws.api_gateway.config import HttpEvent
from apigate.aws.api_gateway.constants import (
    DEFAULT_JSON_REQUEST_TEMPLATE,
    LAMBDA_INVOCATION_PATH,
    METHOD_RESOURCE_TYPE,
    REST_API_LOGICAL_ID,
)
from apigate.aws.api_gateway.naming import method_logical_id

logger = logging.getLogger(__name__)


def _function_invocation_uri(function_name: str) -> dict:
    return {
        "Fn::Join": [
            "",
            [
                "arn:aws:apigateway:",
                {"Ref": "AWS::Region"},
                LAMBDA_INVOCATION_PATH,
                {"Fn::GetAtt": [function_name, "Arn"]},
                "/invocations",
            ],
        ]
    }


def _integration(function_name: str) -> dict:
    # Functions are always invoked with POST, whatever the method of the route is.
    return {
        "IntegrationHttpMethod": "POST",
        "Type": "AWS",
        "Uri": _function_invocation_uri(function_name),
        "RequestTemplates": {"application/json": DEFAULT_JSON_REQUEST_TEMPLATE},
        "IntegrationResponses": [
            {
                "StatusCode": "200",
                "ResponseParameters": {},
                "ResponseTemplates": {"application/json": ""},
            }
        ],
    }


def build_method(event: HttpEvent, resource_logical_id: str) -> tuple[str, dict]:
    """Build the AWS::ApiGateway::Method resource for an HTTP event.

    Args:
        event: Parsed HTTP event of a function
        resource_logical_id: Logical id of the route resource the event's path maps to

    Returns:
        Tuple of (method logical id, resource definition)
    """
    logical_id = method_logical_id(event.method, resource_logical_id, event.path)

    resource = {
        "Type": METHOD_RESOURCE_TYPE,
        "Properties": {
            "AuthorizationType": "NONE",
            "HttpMethod": event.http_method,
            "MethodResponses": [
                {
                    "ResponseModels": {},
                    "ResponseParameters": {},
                    "StatusCode": "200",
                }
            ],
            "RequestParameters": {},
            "Integration": _integration(event.function_name),
            "ResourceId": {"Ref": resource_logical_id},
            "RestApiId": {"Ref": REST_API_LOGICAL_ID},
        },
    }

    authorizer_name = event.authorizer_name
    if authorizer_name is not None:
        authorizer_id = authorizer_logical_id(authorizer_name)
        resource["Properties"]["AuthorizationType"] = "CUSTOM"
        resource["Properties"]["AuthorizerId"] = {"Ref": authorizer_id}
        # The method cannot be created before its authorizer exists
        resource["DependsOn"] = authorizer_id

    if event.private:
        resource["Properties"]["ApiKeyRequired"] = True

    logger.debug(
        "Built method '%s' for %s %s of function '%s' (authorizer: %s, private: %s)",
        logical_id,
        event.http_method,
        event.path,
        event.function_name,
        authorizer_name,
        event.private,
    )
    return logical_id, resource
