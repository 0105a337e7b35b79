import logging

from apigate.aws.api_gateway.constants import (
    DEPLOYMENT_LOGICAL_ID,
    DEPLOYMENT_RESOURCE_TYPE,
    REST_API_LOGICAL_ID,
)

logger = logging.getLogger(__name__)


def build_deployment(stage: str, method_dependency: str | None) -> dict[str, dict]:
    """Build the deployment of the REST API to the given stage.

    A REST API without methods cannot be deployed, so the deployment depends on the
    first compiled method. Without any method there is nothing to deploy and no
    resource is built.
    """
    if method_dependency is None:
        logger.debug("No methods compiled, skipping deployment for stage '%s'", stage)
        return {}

    return {
        DEPLOYMENT_LOGICAL_ID: {
            "Type": DEPLOYMENT_RESOURCE_TYPE,
            "Properties": {
                "RestApiId": {"Ref": REST_API_LOGICAL_ID},
                "StageName": stage,
            },
            "DependsOn": method_dependency,
        }
    }
