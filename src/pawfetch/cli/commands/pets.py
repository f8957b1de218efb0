from __future__ import annotations

from pathlib import Path
from typing import Annotated

import httpx
import typer
from pydantic import ValidationError
from result import Err, Ok, Result, is_err

from pawfetch.common import create_logger
from pawfetch.config import FileConfigStore, PawfetchConfig
from pawfetch.pets import PetCatalog, PetsViewController, build_pets_controller, catalog_names, get_catalog
from pawfetch.settings import settings
from pawfetch.sources import LocalSourceConfig, RemoteSourceConfig
from pawfetch.utils.validation import format_validation_error

from .config import handle_config_error

logger = create_logger("cli.pets")


def _parse_category(value: str) -> PetCatalog:
    try:
        return get_catalog(value)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


CategoryArgument = Annotated[
    PetCatalog,
    typer.Argument(
        parser=_parse_category,
        metavar="CATEGORY",
        help=f"Pet category ({', '.join(catalog_names())}).",
    ),
]
HostOption = Annotated[
    str | None,
    typer.Option("--host", help="Fetch from {host}/{category} instead of the configured source."),
]
FileOption = Annotated[
    Path | None,
    typer.Option("--file", help="Read a local JSON file instead of the configured source."),
]
WorkingDirOption = Annotated[
    Path | None,
    typer.Option(
        "--working-dir",
        hidden=True,
        help="Override working directory used when resolving project config.",
    ),
]

app = typer.Typer(help="Browse pets and pick favorites.")


@app.callback(invoke_without_command=True)
def _pets_root(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("list")
def list_pets(
    category: CategoryArgument,
    host: HostOption = None,
    file: FileOption = None,
    working_dir: WorkingDirOption = None,
) -> None:
    """Show the pets of a category."""
    with httpx.Client() as client:
        controller = _open_controller(category, host, file, working_dir, client)
        if controller.error is not None:
            raise typer.Exit(code=1)
        if not controller.pets:
            typer.echo(f"No {category.name} found.")


@app.command("favorite")
def favorite(
    category: CategoryArgument,
    indexes: Annotated[list[int], typer.Argument(help="Positions shown by 'pets list'.")],
    host: HostOption = None,
    file: FileOption = None,
    working_dir: WorkingDirOption = None,
) -> None:
    """Mark pets as favorites by their list position."""
    with httpx.Client() as client:
        controller = _open_controller(category, host, file, working_dir, client)
        if controller.error is not None:
            raise typer.Exit(code=1)

        pets = controller.pets
        missing = []
        for index in indexes:
            if controller.add_favorite(index):
                typer.echo(f"Selected {pets[index].label()} as favorite.")
            else:
                missing.append(index)

    if missing:
        typer.secho(
            f"No {category.name} at position(s): {', '.join(str(index) for index in missing)}",
            err=True,
            fg=typer.colors.YELLOW,
        )
        raise typer.Exit(code=1)


def _open_controller(
    category: PetCatalog,
    host: str | None,
    file: Path | None,
    working_dir: Path | None,
    client: httpx.Client,
) -> PetsViewController:
    config_result = FileConfigStore(
        working_dir=working_dir,
        settings=settings.to_config_store_settings(),
    ).load()
    if is_err(config_result):
        handle_config_error(config_result.err_value)
        raise typer.Exit(code=1)
    config = config_result.ok_value

    source_result = _resolve_source(category, config, host, file)
    if is_err(source_result):
        typer.secho(source_result.err_value, err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1)

    logger.debug("Opening pets", category=category.name, source=source_result.ok_value.model_dump(mode="json"))
    return build_pets_controller(
        category,
        source_result.ok_value,
        directories=settings.to_data_directories(),
        namespace=settings.paths.preferences_namespace,
        key_strategy=config.decoding.key_strategy,
        client=client,
    )


def _resolve_source(
    category: PetCatalog,
    config: PawfetchConfig,
    host: str | None,
    file: Path | None,
) -> Result[RemoteSourceConfig | LocalSourceConfig, str]:
    if host is not None and file is not None:
        return Err("Use either --host or --file, not both.")

    if file is not None:
        return Ok(LocalSourceConfig(path=file))

    if host is not None:
        try:
            return Ok(RemoteSourceConfig(host=host))
        except ValidationError as exc:
            return Err(format_validation_error("host", exc))

    configured = config.sources.get(category.name)
    if configured is None:
        return Err(
            f"No source configured for '{category.name}'. "
            f"Pass --host or --file, or add it under 'sources' in config.yaml."
        )
    return Ok(configured)
