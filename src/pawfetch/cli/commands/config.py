from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Literal

import typer
import yaml
from result import is_err

from pawfetch.config import ConfigError, FileConfigStore
from pawfetch.settings import settings

FormatOption = Annotated[
    Literal["yaml", "json"],
    typer.Option("--format", "-f", show_default=True, case_sensitive=False, help="Output format (yaml or json)."),
]
WorkingDirOption = Annotated[
    Path | None,
    typer.Option(
        "--working-dir",
        hidden=True,
        help="Override working directory used when resolving project config.",
    ),
]

app = typer.Typer(help="Inspect pawfetch configuration.")


@app.callback(invoke_without_command=True)
def _config_root(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("show")
def show(
    format: FormatOption = "yaml",
    working_dir: WorkingDirOption = None,
) -> None:
    store = FileConfigStore(
        working_dir=working_dir,
        settings=settings.to_config_store_settings(),
    )
    result = store.load().map(lambda config: config.model_dump(mode="json"))
    if is_err(result):
        handle_config_error(result.err_value)
        raise typer.Exit(code=1)

    typer.echo(_format_payload(result.ok_value, format.lower()))


def handle_config_error(error: ConfigError) -> None:
    message = f"[{error.scope.value}] {error.message}"
    expected_path = getattr(error, "expected_path", None)
    error_path = getattr(error, "path", None)
    error_field = getattr(error, "field", None)
    if error_field:
        message = f"{message} (field: {error_field})"
    if expected_path is not None:
        message = f"{message} (expected at {expected_path})"
    elif error_path is not None:
        message = f"{message} ({error_path})"

    typer.secho(message, err=True, fg=typer.colors.RED)


def _format_payload(payload: dict[str, object], format: str) -> str:
    if format == "json":
        return json.dumps(payload, indent=2, sort_keys=True)
    return yaml.safe_dump(payload, sort_keys=True)
