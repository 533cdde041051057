"""Stage 2: fetch details for collected ids and keep single-attachment opportunities."""

import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from grants_harvester.config import HarvesterConfig
from grants_harvester.connectors.base import BaseConnector, error_details
from grants_harvester.models.opportunity import FilteredOpportunity, OpportunityDetail
from grants_harvester.pacing import Pacer, SleepPacer
from grants_harvester.stats import StatsAccumulator
from grants_harvester.store.base import ArtifactStore

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class DetailHarvester:
    """
    Sequentially fetches opportunity details, filters for exactly one
    downloadable attachment, and aggregates statistics.
    A failed fetch skips that id; only a missing id list stops the run.
    """

    def __init__(
        self,
        connector: BaseConnector,
        store: ArtifactStore,
        config: Optional[HarvesterConfig] = None,
        pacer: Optional[Pacer] = None,
        clock: Callable[[], datetime] = _utc_now,
    ):
        self._connector = connector
        self._store = store
        self._config = config or HarvesterConfig()
        self._pacer = pacer or SleepPacer()
        self._clock = clock

    def fetch_opportunity_details(self, opportunity_id: str) -> Optional[OpportunityDetail]:
        """Detail record for one id, or None when the API has no data for it."""
        return self._connector.fetch_details(opportunity_id)

    def _fetch_or_skip(self, opportunity_id: str) -> Optional[OpportunityDetail]:
        try:
            return self.fetch_opportunity_details(opportunity_id)
        except Exception as e:
            logger.error("Error fetching opportunity %s: %s", opportunity_id, e)
            details = error_details(e)
            if details:
                logger.error("API Error details: %s", details)
            return None

    def process_opportunities(self) -> list[FilteredOpportunity]:
        """
        Process every collected id in order, then save the filtered results
        and the statistics summary. Returns the filtered results.
        """
        ids = self._store.load_ids()
        results: list[FilteredOpportunity] = []
        stats = StatsAccumulator()
        total = len(ids)

        logger.info("Processing %d opportunities...", total)

        for i, opportunity_id in enumerate(ids, 1):
            detail = self._fetch_or_skip(opportunity_id)

            if detail is None:
                logger.info("[%d/%d] Skipped: No data found", i, total)
            else:
                stats.add(detail)
                if detail.has_single_attachment:
                    results.append(FilteredOpportunity.from_detail(detail))
                    logger.info("[%d/%d] Included: %s", i, total, detail.opportunity_title)
                else:
                    logger.info(
                        "[%d/%d] Skipped: %d attachment(s) found (need exactly 1)",
                        i, total, detail.attachment_count,
                    )

            self._pacer.wait(self._config.harvester_delay_ms)

        self._store.save_results(results)
        logger.info("Processed %d opportunities with exactly 1 attachment", len(results))

        summary = stats.summary(generated_at=self._clock())
        self._store.save_stats(summary)
        logger.info("Statistics:")
        logger.info("  Total opportunities processed: %d", summary.total_opportunities_processed)
        logger.info("  Unique mime types found: %d", len(summary.mime_type_counts))
        logger.info("  Mime type counts (opportunities with each mime type): %s", summary.mime_type_counts)
        logger.info("  Attachment count distribution: %s", summary.attachment_count_distribution)

        return results
