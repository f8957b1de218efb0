from __future__ import annotations

import os
from typing import Annotated

import typer

from pawfetch.common import LoggingConfig, create_logger, setup_cli_logging
from pawfetch.config import FileConfigStore
from pawfetch.settings import settings

from .commands import config as config_commands
from .commands import pets as pets_commands

logger = create_logger("cli")

app = typer.Typer(help="Fetch pets from remote endpoints or local files and keep favorites.")
app.add_typer(config_commands.app, name="config")
app.add_typer(pets_commands.app, name="pets")


def _print_version(value: bool) -> None:
    if value:
        typer.echo(f"{settings.app.project_name} {settings.app.version}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def _root_callback(
    ctx: typer.Context,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable colored output")] = False,
    version: Annotated[
        bool,
        typer.Option("--version", callback=_print_version, is_eager=True, help="Show the version and exit."),
    ] = False,
) -> None:
    if no_color or os.getenv("NO_COLOR"):
        ctx.color = False

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _load_logging_config() -> LoggingConfig:
    # A broken config is reported by the command that needs it; logging falls back to defaults.
    store = FileConfigStore(settings=settings.to_config_store_settings())
    return store.load().map(lambda config: config.logging).unwrap_or(LoggingConfig())


def main() -> None:
    """Entrypoint for the pawfetch CLI."""
    logging_config = _load_logging_config()
    if logging_config.enabled:
        setup_cli_logging(
            app_info=settings.app,
            config=logging_config,
            directories=settings.to_data_directories(),
        )
    logger.debug("Starting CLI", version=settings.app.version)
    app()
