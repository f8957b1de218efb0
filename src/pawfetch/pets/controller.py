"""Presentation layer for a list of pets."""

from __future__ import annotations

import weakref
from collections.abc import Callable

import typer
from result import Err, Ok, Result

from pawfetch.common import create_logger
from pawfetch.fetching import FetchError

from .service import PetsService
from .view_data import PetViewData

logger = create_logger("pets.controller")

type Render = Callable[[str], None]


def _render_error(message: str) -> None:
    typer.secho(message, err=True, fg=typer.colors.RED)


class PetsViewController:
    """Loads pets on construction and lets the user pick favorites by index.

    The controller only knows ``PetsService`` and ``PetViewData``; how pets
    are fetched, decoded or saved stays behind the service.
    """

    def __init__(
        self,
        service: PetsService,
        render: Render | None = None,
        render_error: Render | None = None,
    ) -> None:
        self._service = service
        self._render = render or typer.echo
        self._render_error = render_error or _render_error
        self._pets: list[PetViewData] = []
        self.error: FetchError | None = None

        self._load()

    @property
    def pets(self) -> list[PetViewData]:
        return list(self._pets)

    def add_favorite(self, index: int) -> bool:
        if not 0 <= index < len(self._pets):
            logger.debug("Ignoring favorite selection out of range", index=index, count=len(self._pets))
            return False
        self._pets[index].did_select()
        return True

    def _load(self) -> None:
        controller_ref = weakref.ref(self)

        def on_loaded(result: Result[list[PetViewData], FetchError]) -> None:
            controller = controller_ref()
            if controller is None:
                return
            match result:
                case Ok(pets):
                    controller._show_pets(pets)
                case Err(error):
                    controller._show_error(error)

        self._service.get_pets(on_loaded)

    def _show_pets(self, pets: list[PetViewData]) -> None:
        self._pets = pets
        self.error = None
        for index, pet in enumerate(pets):
            self._render(f"{index}. {pet.label()}")

    def _show_error(self, error: FetchError) -> None:
        self.error = error
        self._render_error(error.message)
