import json
import logging
import os
from pathlib import Path
from typing import Any, NoReturn

from rich.console import Console
from rich.markup import escape

from apigate.aws.api_gateway import CompilationResult, compile_api_gateway_events
from apigate.aws.api_gateway.outputs import describe_endpoint
from apigate.config import ServiceDefinition
from apigate.exceptions import ApigateError, InvalidConfigShape

console = Console()
logger = logging.getLogger(__name__)


def _handle_error(error: ApigateError) -> NoReturn:
    if os.getenv("APIGATE_DEBUG", "0") == "1":
        raise error
    console.print(f"[bold red]✗ {escape(str(error))}[/bold red]", highlight=False, soft_wrap=True)
    raise SystemExit(1) from None


def _load_json(path: Path, what: str) -> Any:
    logger.debug("Reading %s from %s", what, path)
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise InvalidConfigShape(f"Invalid JSON in {what} file {path}: {e}") from e


def _compile(
    manifest_path: Path,
    resource_ids_path: Path,
    stage: str | None,
    region: str | None,
) -> CompilationResult:
    service = ServiceDefinition.from_dict(
        _load_json(manifest_path, "manifest"), stage=stage, region=region
    )
    resource_logical_ids = _load_json(resource_ids_path, "resource ids")
    if not isinstance(resource_logical_ids, dict):
        raise InvalidConfigShape("Resource ids file must map paths to logical ids")
    return compile_api_gateway_events(service, resource_logical_ids)


def run_compile(
    manifest_path: Path,
    resource_ids_path: Path,
    stage: str | None = None,
    region: str | None = None,
    output_path: Path | None = None,
) -> None:
    try:
        result = _compile(manifest_path, resource_ids_path, stage, region)
    except ApigateError as e:
        _handle_error(e)

    if output_path is None:
        console.print_json(result.template.to_json())
        return

    output_path.write_text(result.template.to_json() + "\n", encoding="utf-8")
    console.print(
        f"[bold green]✓[/bold green] Wrote {len(result.resources)} resource(s) and "
        f"{len(result.outputs)} output(s) to {output_path}",
        highlight=False,
        soft_wrap=True,
    )


def run_endpoints(
    manifest_path: Path,
    resource_ids_path: Path,
    stage: str | None = None,
    region: str | None = None,
) -> None:
    try:
        result = _compile(manifest_path, resource_ids_path, stage, region)
    except ApigateError as e:
        _handle_error(e)

    endpoints = {
        key: output for key, output in result.outputs.items() if key.startswith("Endpoint")
    }
    if not endpoints:
        console.print("[yellow]No HTTP endpoints declared[/yellow]")
        return
    for key, output in endpoints.items():
        console.print(
            f"[cyan]{key}[/cyan]: {describe_endpoint(output)}", highlight=False, soft_wrap=True
        )
