import logging
from typing import Any

from apigate.aws.api_gateway.constants import API_KEY_RESOURCE_TYPE, REST_API_LOGICAL_ID
from apigate.aws.api_gateway.naming import api_key_logical_id
from apigate.exceptions import InvalidConfigShape

logger = logging.getLogger(__name__)


def _validate_api_keys(api_keys: Any) -> None:
    if not isinstance(api_keys, list | tuple):
        raise InvalidConfigShape("apiKeys property must be an array")
    for api_key in api_keys:
        if not isinstance(api_key, str):
            raise InvalidConfigShape("API Keys must be strings")


def build_api_keys(api_keys: Any, stage: str) -> dict[str, dict]:
    """Build one AWS::ApiGateway::ApiKey resource per declared key.

    Every key is enabled and bound to the given stage of the REST API. The whole list
    is validated first, so either all keys are built or none.
    """
    # Any falsy value (None, "", {}) means no keys were declared
    if not api_keys and not isinstance(api_keys, list | tuple):
        return {}

    _validate_api_keys(api_keys)

    resources = {
        api_key_logical_id(index): {
            "Type": API_KEY_RESOURCE_TYPE,
            "Properties": {
                "Enabled": True,
                "Name": api_key,
                "StageKeys": [
                    {
                        "RestApiId": {"Ref": REST_API_LOGICAL_ID},
                        "StageName": stage,
                    }
                ],
            },
        }
        for index, api_key in enumerate(api_keys)
    }
    logger.debug("Built %d API key(s) for stage '%s'", len(resources), stage)
    return resources
