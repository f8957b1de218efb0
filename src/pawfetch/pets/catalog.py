"""Pet categories known to pawfetch."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .models import Bird, Cat, Dog, PetRecord


@dataclass(frozen=True)
class PetCatalog[R: PetRecord]:
    """How one category's wire records are identified and described.

    Attributes:
        name: Category name, used as the default resource path and in favorite keys
        record_type: Wire model a payload entry decodes into
        identify: Backend identifier of a record
        describe: Short human-readable details shown next to the breed
    """

    name: str
    record_type: type[R]
    identify: Callable[[R], str]
    describe: Callable[[R], str]


def _describe_bird(bird: Bird) -> str:
    flight = "can fly" if bird.can_fly else "flightless"
    return f"{bird.size}, {flight}"


CATS = PetCatalog(
    name="cats",
    record_type=Cat,
    identify=lambda cat: cat.identifier,
    describe=lambda cat: cat.size.description,
)

DOGS = PetCatalog(
    name="dogs",
    record_type=Dog,
    identify=lambda dog: str(dog.id),
    describe=lambda _: "",
)

BIRDS = PetCatalog(
    name="birds",
    record_type=Bird,
    identify=lambda bird: bird.id,
    describe=_describe_bird,
)

_CATALOGS: dict[str, PetCatalog] = {catalog.name: catalog for catalog in (CATS, DOGS, BIRDS)}


def catalog_names() -> list[str]:
    return sorted(_CATALOGS)


def get_catalog(name: str) -> PetCatalog:
    try:
        return _CATALOGS[name.strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown pet category '{name}'. Expected one of: {', '.join(catalog_names())}") from None
