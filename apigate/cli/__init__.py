import logging
import sys
from importlib import metadata
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

import click
from appdirs import user_log_dir
from rich.console import Console
from rich.logging import RichHandler

from apigate.cli.commands import run_compile, run_endpoints

console = Console()

app_logger = logging.getLogger("apigate")
# Set the logger to capture ALL messages from 'apigate' internally
app_logger.setLevel(logging.DEBUG)

app_name = "apigate"
log_dir = Path(user_log_dir(app_name))
log_dir.mkdir(parents=True, exist_ok=True)
log_file_path = log_dir / f"{app_name}.log"
file_handler = TimedRotatingFileHandler(
    filename=str(log_file_path), when="D", interval=1, backupCount=7, encoding="utf-8"
)
file_handler.setLevel(logging.DEBUG)  # All debug messages and above go to the file
file_formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
file_handler.setFormatter(file_formatter)
app_logger.addHandler(file_handler)

logger = logging.getLogger(__name__)

_existing_file = click.Path(exists=True, dir_okay=False, path_type=Path)


@click.group(invoke_without_command=True)
@click.option(
    "--verbose", "-v", count=True, help="Increase verbosity. -v for INFO, -vv for DEBUG logs."
)
@click.option("--version", is_flag=True, help="Show apigate version.")
@click.pass_context
def cli(ctx: click.Context, verbose: int, version: bool) -> None:
    if version:
        _version()  # Exits after printing version

    # If no command was invoked, show help
    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        ctx.exit(0)

    if verbose > 0:
        console_handler = RichHandler(
            console=console,
            show_time=False,
            show_level=True,
            markup=True,
            tracebacks_suppress=[click],
            rich_tracebacks=True,
        )
        if verbose == 1:
            console_handler.setLevel(logging.INFO)
        elif verbose >= 2:  # noqa: PLR2004
            console_handler.setLevel(logging.DEBUG)

        console.print(f"[italic dim]Logs saved to: {log_file_path}[/]")
        app_logger.addHandler(console_handler)


@click.command(name="compile")
@click.argument("manifest", type=_existing_file)
@click.option(
    "--resource-ids",
    "resource_ids",
    type=_existing_file,
    required=True,
    help="JSON file mapping each path to the logical id of its route resource.",
)
@click.option("--stage", default=None, help="Stage to compile for (overrides the manifest).")
@click.option("--region", default=None, help="Region to compile for (overrides the manifest).")
@click.option(
    "--output",
    "-o",
    "output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the template to this file instead of printing it.",
)
def compile_(
    manifest: Path,
    resource_ids: Path,
    stage: str | None,
    region: str | None,
    output: Path | None,
) -> None:
    """Compiles the HTTP events of a service into a CloudFormation template."""
    logger.info("Compiling %s", manifest)
    run_compile(manifest, resource_ids, stage=stage, region=region, output_path=output)


@click.command()
@click.argument("manifest", type=_existing_file)
@click.option(
    "--resource-ids",
    "resource_ids",
    type=_existing_file,
    required=True,
    help="JSON file mapping each path to the logical id of its route resource.",
)
@click.option("--stage", default=None, help="Stage to compile for (overrides the manifest).")
@click.option("--region", default=None, help="Region to compile for (overrides the manifest).")
def endpoints(manifest: Path, resource_ids: Path, stage: str | None, region: str | None) -> None:
    """Shows the endpoints the service will expose."""
    run_endpoints(manifest, resource_ids, stage=stage, region=region)


@click.command()
def version() -> None:
    """Shows version and exit."""
    _version()


cli.add_command(version)
cli.add_command(compile_)
cli.add_command(endpoints)


def _version() -> None:
    apigate_version = metadata.version("apigate")
    console.print(f"apigate version: {apigate_version}", highlight=False)
    sys.exit(0)
