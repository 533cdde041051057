"""Statistics summary written alongside harvested details."""

from datetime import datetime

from pydantic import BaseModel, Field


class StatisticsSummary(BaseModel):
    """
    Aggregate over every opportunity that returned a detail record.
    Mapping order is significant: it is preserved in the JSON output.
    """

    total_opportunities_processed: int = 0
    mime_type_counts: dict[str, int] = Field(default_factory=dict)
    attachment_count_distribution: dict[str, int] = Field(default_factory=dict)
    generated_at: datetime
