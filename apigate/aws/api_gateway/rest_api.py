from apigate.aws.api_gateway.constants import (
    PERMISSION_RESOURCE_TYPE,
    REST_API_LOGICAL_ID,
    REST_API_RESOURCE_TYPE,
)
from apigate.aws.api_gateway.naming import permission_logical_id


def rest_api_name(service: str, stage: str) -> str:
    return f"{stage}-{service}"


def build_rest_api(service: str, stage: str) -> dict[str, dict]:
    return {
        REST_API_LOGICAL_ID: {
            "Type": REST_API_RESOURCE_TYPE,
            "Properties": {"Name": rest_api_name(service, stage)},
        }
    }


def build_invoke_permission(function_name: str) -> dict[str, dict]:
    """Allow API Gateway to invoke the function from any method of the REST API."""
    return {
        permission_logical_id(function_name): {
            "Type": PERMISSION_RESOURCE_TYPE,
            "Properties": {
                "FunctionName": {"Fn::GetAtt": [function_name, "Arn"]},
                "Action": "lambda:InvokeFunction",
                "Principal": "apigateway.amazonaws.com",
                "SourceArn": {
                    "Fn::Sub": [
                        "arn:${AWS::Partition}:execute-api:${AWS::Region}"
                        ":${AWS::AccountId}:${RestApiId}/*",
                        {"RestApiId": {"Ref": REST_API_LOGICAL_ID}},
                    ]
                },
            },
        }
    }
