"""Stage 1: collect every posted grant opportunity id from the search endpoint.

Pages are requested sequentially from 1 until the server-reported total is
reached. Any failure stops pagination; the ids gathered so far are still
saved before the error propagates.
"""

import logging
from typing import Optional

import httpx

from grants_harvester.config import HarvesterConfig
from grants_harvester.connectors.base import BaseConnector, error_details
from grants_harvester.models.opportunity import OpportunityPage
from grants_harvester.pacing import Pacer, SleepPacer
from grants_harvester.store.base import ArtifactStore

logger = logging.getLogger(__name__)


class IdentifierCollector:
    """Paginates the search endpoint and persists the ordered id list."""

    def __init__(
        self,
        connector: BaseConnector,
        store: ArtifactStore,
        config: Optional[HarvesterConfig] = None,
        pacer: Optional[Pacer] = None,
    ):
        self._connector = connector
        self._store = store
        self._config = config or HarvesterConfig()
        self._pacer = pacer or SleepPacer()

    def fetch_opportunity_page(self, page_number: int) -> OpportunityPage:
        """Fetch one page; errors are logged with the page number and re-raised."""
        try:
            return self._connector.search_page(page_number, self._config.page_size)
        except (httpx.HTTPError, ValueError) as e:
            logger.error("Error fetching page %d: %s", page_number, e)
            details = error_details(e)
            if details:
                logger.error("API Error details: %s", details)
            raise

    def fetch_all_opportunity_ids(self) -> list[str]:
        """
        Fetch ids from pages 1..total_pages in order and save them.
        The id list is saved even when a page fails; the error is then re-raised.
        """
        current_page = 1
        total_pages = 1
        all_ids: list[str] = []

        logger.info("Fetching all posted grant opportunity IDs...")
        try:
            while current_page <= total_pages:
                try:
                    page = self.fetch_opportunity_page(current_page)
                except (httpx.HTTPError, ValueError):
                    logger.error("Failed to fetch page %d. Stopping fetch process.", current_page)
                    raise
                all_ids.extend(page.ids)
                total_pages = page.total_pages

                logger.info("Page %d/%d fetched (%d IDs)", current_page, total_pages, len(page.ids))
                current_page += 1

                self._pacer.wait(self._config.collector_delay_ms)
        finally:
            self._store.save_ids(all_ids)
            logger.info("Total opportunities collected: %d", len(all_ids))

        return all_ids
