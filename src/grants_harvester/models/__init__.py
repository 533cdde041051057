"""Data models for opportunity pages, details, and run statistics."""

from grants_harvester.models.opportunity import (
    AttachmentSummary,
    FilteredOpportunity,
    OpportunityDetail,
    OpportunityPage,
)
from grants_harvester.models.stats import StatisticsSummary

__all__ = [
    "AttachmentSummary",
    "FilteredOpportunity",
    "OpportunityDetail",
    "OpportunityPage",
    "StatisticsSummary",
]
