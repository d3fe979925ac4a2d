"""Command-line interface for arise-setup."""

import logging
from pathlib import Path

import click
from rich.logging import RichHandler

from arise_setup import __version__
from arise_setup.config import load_config
from arise_setup.console import console
from arise_setup.pipeline import run_pipeline, select_steps
from arise_setup.project import MAX_PORT, MIN_PORT, ProjectContext

logger = logging.getLogger(__name__)


def version_callback(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    """Print version and exit."""
    if not value or ctx.resilient_parsing:
        return
    console.print(f"arise-setup [bold cyan]{__version__}[/bold cyan]")
    ctx.exit()


def configure_logging(verbose: bool) -> None:
    """Route library logging through rich; DEBUG when verbose, else WARNING."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@click.command()
@click.option(
    "--version",
    is_flag=True,
    callback=version_callback,
    expose_value=False,
    is_eager=True,
    help="Show version and exit.",
)
@click.option(
    "--path",
    "-p",
    "project_path",
    default=".",
    show_default=True,
    type=click.Path(path_type=Path),
    help="Path to the Cordova project.",
)
@click.option(
    "--port",
    "-P",
    type=click.IntRange(MIN_PORT, MAX_PORT),
    help="Port the launcher's local server listens on (default: 18081).",
)
@click.option(
    "--entry",
    "-e",
    help="Entry file under www/web/ opened by the launcher (default: index.html).",
)
@click.option(
    "--plugins/--no-plugins",
    default=True,
    help="Install required Cordova plugins (default: install).",
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging.")
@click.pass_context
def main(
    ctx: click.Context,
    project_path: Path,
    port: int | None,
    entry: str | None,
    plugins: bool,
    verbose: bool,
) -> None:
    """Turn a fresh Cordova project into the Arise launcher shell.

    Injects a CSP meta tag into www/index.html, writes www/launcher.html,
    installs the required plugins, regenerates config.xml and the Android
    network security config, and seeds placeholder icons.
    """
    configure_logging(verbose)

    root = project_path.resolve()
    config = load_config(root)
    logger.debug("Effective config before CLI options: %s", config.to_dict())

    def _from_cli(param_name: str) -> bool:
        """Check if a parameter was explicitly set on the command line."""
        source = ctx.get_parameter_source(param_name)
        return source == click.core.ParameterSource.COMMANDLINE

    # CLI options win over config files; config files win over defaults
    if port is None:
        port = config.port
    if entry is None:
        entry = config.entry
    if not _from_cli("plugins") and config.plugins is not None:
        plugins = config.plugins

    project = ProjectContext.from_root(root, port=port, entry=entry)
    logger.debug("Resolved context: %s", project)

    result = run_pipeline(project, select_steps(with_plugins=plugins))
    if not result.ok:
        raise SystemExit(result.exit_code)
