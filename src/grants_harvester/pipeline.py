"""Pipeline orchestration: collect ids → harvest details."""

from typing import Optional

from grants_harvester.collector import IdentifierCollector
from grants_harvester.config import HarvesterConfig
from grants_harvester.connectors.base import BaseConnector
from grants_harvester.connectors.simpler_grants import SimplerGrantsConnector
from grants_harvester.harvester import DetailHarvester
from grants_harvester.models.opportunity import FilteredOpportunity
from grants_harvester.pacing import Pacer
from grants_harvester.store import ArtifactStore, JsonArtifactStore


def build_store(config: HarvesterConfig) -> ArtifactStore:
    return JsonArtifactStore(config.data_dir)


def run_collect(
    config: HarvesterConfig,
    *,
    connector: Optional[BaseConnector] = None,
    store: Optional[ArtifactStore] = None,
    pacer: Optional[Pacer] = None,
) -> list[str]:
    """Run the collector stage. Closes the connector only if it created it."""
    owned = connector is None
    connector = connector or SimplerGrantsConnector(config)
    try:
        collector = IdentifierCollector(connector, store or build_store(config), config, pacer)
        return collector.fetch_all_opportunity_ids()
    finally:
        if owned:
            connector.close()


def run_harvest(
    config: HarvesterConfig,
    *,
    connector: Optional[BaseConnector] = None,
    store: Optional[ArtifactStore] = None,
    pacer: Optional[Pacer] = None,
) -> list[FilteredOpportunity]:
    """Run the harvester stage. The id list must already be in the store."""
    store = store or build_store(config)
    if not store.has_ids():
        store.load_ids()  # raises FileNotFoundError before any client is opened
    owned = connector is None
    connector = connector or SimplerGrantsConnector(config)
    try:
        harvester = DetailHarvester(connector, store, config, pacer)
        return harvester.process_opportunities()
    finally:
        if owned:
            connector.close()


def run_pipeline(
    config: HarvesterConfig,
    *,
    connector: Optional[BaseConnector] = None,
    store: Optional[ArtifactStore] = None,
    pacer: Optional[Pacer] = None,
) -> tuple[list[str], list[FilteredOpportunity]]:
    """
    Run both stages against the same store. A collector failure stops the
    pipeline before harvesting. Returns (ids, filtered results).
    """
    store = store or build_store(config)
    owned = connector is None
    connector = connector or SimplerGrantsConnector(config)
    try:
        ids = run_collect(config, connector=connector, store=store, pacer=pacer)
        results = run_harvest(config, connector=connector, store=store, pacer=pacer)
    finally:
        if owned:
            connector.close()
    return ids, results
