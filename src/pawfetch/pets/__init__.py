"""Pets: the consumer side of pawfetch (service, view data, controller)."""

from .catalog import BIRDS, CATS, DOGS, PetCatalog, catalog_names, get_catalog
from .controller import PetsViewController
from .router import build_pets_controller
from .service import PetsService, PetsServiceImpl
from .view_data import PetViewData

__all__ = [
    "BIRDS",
    "CATS",
    "DOGS",
    "PetCatalog",
    "PetViewData",
    "PetsService",
    "PetsServiceImpl",
    "PetsViewController",
    "build_pets_controller",
    "catalog_names",
    "get_catalog",
]
