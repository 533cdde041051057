"""Incremental statistics over harvested opportunity details."""

from collections import Counter
from datetime import datetime

from grants_harvester.models.opportunity import OpportunityDetail
from grants_harvester.models.stats import StatisticsSummary


class StatsAccumulator:
    """
    Counts processed opportunities, mime types and attachment counts.
    A mime type is counted once per opportunity, however many attachments carry it.
    """

    def __init__(self) -> None:
        self.total_processed = 0
        self.mime_type_counts: Counter[str] = Counter()
        self.attachment_counts: Counter[int] = Counter()

    def add(self, detail: OpportunityDetail) -> None:
        self.total_processed += 1
        self.attachment_counts[detail.attachment_count] += 1
        # dict.fromkeys keeps first-seen order so ties sort stably
        for mime_type in dict.fromkeys(detail.mime_types):
            self.mime_type_counts[mime_type] += 1

    def summary(self, generated_at: datetime) -> StatisticsSummary:
        """Mime types by descending count; distribution by ascending attachment count."""
        return StatisticsSummary(
            total_opportunities_processed=self.total_processed,
            mime_type_counts=dict(self.mime_type_counts.most_common()),
            attachment_count_distribution={
                str(count): self.attachment_counts[count]
                for count in sorted(self.attachment_counts)
            },
            generated_at=generated_at,
        )
