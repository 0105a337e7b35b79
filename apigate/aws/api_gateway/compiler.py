import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, final

from apigate.aws.api_gateway.api_keys import build_api_keys
from apigate.aws.api_gateway.config import HttpEvent, parse_http_event
from apigate.aws.api_gateway.deployment import build_deployment
from apigate.aws.api_gateway.methods import build_method
from apigate.aws.api_gateway.naming import endpoint_output_id
from apigate.aws.api_gateway.outputs import build_endpoint_output
from apigate.aws.api_gateway.rest_api import build_invoke_permission, build_rest_api
from apigate.config import FunctionDefinition, ServiceDefinition
from apigate.context import CompilationPass
from apigate.exceptions import MalformedIdentifier
from apigate.template import Template

logger = logging.getLogger(__name__)


@final
@dataclass(frozen=True)
class CompilationResult:
    template: Template
    method_dependency: str | None
    compiled_methods: tuple[str, ...]

    @property
    def resources(self) -> dict[str, dict]:
        return self.template.resources

    @property
    def outputs(self) -> dict[str, dict]:
        return self.template.outputs


def _http_events(function: FunctionDefinition) -> list[HttpEvent]:
    return [
        parse_http_event(function.name, event["http"])
        for event in function.events
        if "http" in event
    ]


def _has_http_events(service: ServiceDefinition) -> bool:
    return any("http" in event for function in service.functions for event in function.events)


def _route_resource_id(event: HttpEvent, resource_logical_ids: Mapping[str, str]) -> str:
    resource_logical_id = resource_logical_ids.get(event.path)
    if resource_logical_id is None:
        raise MalformedIdentifier(event.path, None)
    return resource_logical_id


def _compile_event(
    event: HttpEvent,
    resource_logical_ids: Mapping[str, str],
    service: ServiceDefinition,
    template: Template,
    compilation: CompilationPass,
) -> None:
    logical_id, method = build_method(event, _route_resource_id(event, resource_logical_ids))
    template.add_resources({logical_id: method})

    output_id = endpoint_output_id(compilation.next_endpoint_index())
    template.add_outputs(
        {
            output_id: build_endpoint_output(
                event.method, event.path, service.provider.region, service.provider.stage
            )
        }
    )
    compilation.record_method(logical_id)


def compile_api_gateway_events(
    service: ServiceDefinition,
    resource_logical_ids: Mapping[str, str],
    template: dict[str, Any] | None = None,
) -> CompilationResult:
    """Compile the HTTP events of all functions of a service into API Gateway resources.

    Functions and their events are compiled in declaration order. Logical id suffixes
    and the endpoint output counter depend on that order, so compiling the same
    service twice produces identical templates.
    A service without any HTTP event adds nothing to the template.

    Args:
        service: Service with its functions and provider settings
        resource_logical_ids: Logical id of the route resource for every declared path,
            e.g. {"users/create": "ResourceApigEvent5"}
        template: Optional template dict to add the resources and outputs to. Entries
            already present are kept.

    Returns:
        CompilationResult with the template and the logical id of the first method

    Raises:
        InvalidEventShape: If an HTTP event is malformed
        InvalidConfigShape: If the API keys are not a list of strings
        MalformedIdentifier: If a path has no usable route resource logical id
        ResourceConflict: If a resource would replace an existing one of another type
    """
    compiled_template = Template(template)
    compilation = CompilationPass()
    stage = service.provider.stage

    # No methods means no deployment, and API keys need its stage
    if not _has_http_events(service):
        logger.info("Service '%s' declares no HTTP events, nothing to compile", service.service)
        return CompilationResult(compiled_template, None, ())

    compiled_template.add_resources(build_rest_api(service.service, stage))

    for function in service.functions:
        events = _http_events(function)
        for event in events:
            _compile_event(event, resource_logical_ids, service, compiled_template, compilation)
        if events:
            compiled_template.add_resources(build_invoke_permission(function.name))

    compiled_template.add_resources(build_deployment(stage, compilation.method_dependency))
    compiled_template.add_resources(build_api_keys(service.provider.api_keys, stage))

    logger.info(
        "Compiled %d method(s) for service '%s' (stage: %s, region: %s)",
        len(compilation.compiled_methods),
        service.service,
        stage,
        service.provider.region,
    )
    return CompilationResult(
        compiled_template,
        compilation.method_dependency,
        tuple(compilation.compiled_methods),
    )
