"""Wires a pets controller together from configuration."""

from __future__ import annotations

from concurrent.futures import Executor

import httpx

from pawfetch.common import AppDirectories
from pawfetch.datastore import FilePreferenceStore
from pawfetch.decoding import JsonPayloadDecoder, KeyDecodingStrategy
from pawfetch.fetching import create_fetcher
from pawfetch.persistence import PreferencesPersister
from pawfetch.sources import LocalSourceConfig, RemoteSourceConfig

from .catalog import PetCatalog
from .controller import PetsViewController, Render
from .service import PetsServiceImpl


def build_pets_controller(
    catalog: PetCatalog,
    source: RemoteSourceConfig | LocalSourceConfig,
    *,
    directories: AppDirectories,
    namespace: str = "favorites",
    key_strategy: KeyDecodingStrategy = KeyDecodingStrategy.USE_DEFAULT_KEYS,
    client: httpx.Client | None = None,
    executor: Executor | None = None,
    render: Render | None = None,
    render_error: Render | None = None,
) -> PetsViewController:
    decoder = JsonPayloadDecoder(key_strategy)
    fetcher = create_fetcher(source, decoder, category=catalog.name, client=client, executor=executor)
    persister = PreferencesPersister(FilePreferenceStore(namespace=namespace, directories=directories))
    service = PetsServiceImpl(fetcher, persister, catalog)

    return PetsViewController(service, render=render, render_error=render_error)
