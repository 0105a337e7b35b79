from apigate.aws.api_gateway.constants import EXECUTE_API_HOST_SUFFIX, REST_API_LOGICAL_ID


def build_endpoint_output(method: str, path: str, region: str, stage: str) -> dict:
    """Build the stack output describing one endpoint.

    The value resolves to e.g. 'GET - https://abc123.execute-api.us-east-1.amazonaws.com/dev/users'
    once the REST API id is known.
    """
    return {
        "Description": "Endpoint info",
        "Value": {
            "Fn::Join": [
                "",
                [
                    f"{method.upper()} - https://",
                    {"Ref": REST_API_LOGICAL_ID},
                    f".execute-api.{region}.{EXECUTE_API_HOST_SUFFIX}/{stage}/{path}",
                ],
            ]
        },
    }


def describe_endpoint(output: dict) -> str:
    """Render an endpoint output as text, showing references as '<LogicalId>'."""
    value = output["Value"]
    if isinstance(value, str):
        return value
    separator, parts = value["Fn::Join"]
    return separator.join(
        part if isinstance(part, str) else f"<{part['Ref']}>" for part in parts
    )
