import pytest

from apigate.config import FunctionDefinition, ProviderConfig, ServiceDefinition

TEST_STAGE = "dev"
TEST_REGION = "us-east-1"
TEST_SERVICE = "first-service"


def _make_service(
    functions: dict[str, list[dict]] | None = None,
    api_keys: object = None,
    stage: str = TEST_STAGE,
    region: str = TEST_REGION,
) -> ServiceDefinition:
    return ServiceDefinition(
        service=TEST_SERVICE,
        provider=ProviderConfig(stage=stage, region=region, api_keys=api_keys),
        functions=tuple(
            FunctionDefinition(name, tuple(events)) for name, events in (functions or {}).items()
        ),
    )


@pytest.fixture
def make_service():
    """Build a service from {function name: [events]}, keeping declaration order."""
    return _make_service


@pytest.fixture
def resource_logical_ids() -> dict[str, str]:
    return {
        "users/create": "ResourceApigEvent5",
        "users/list": "ResourceApigEvent6",
        "users/{id}": "ResourceApigEvent7",
        "orders": "ResourceApigEvent12",
    }
