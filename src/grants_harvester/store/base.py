"""Abstract artifact store shared by the two stages."""

from abc import ABC, abstractmethod

from grants_harvester.models.opportunity import FilteredOpportunity
from grants_harvester.models.stats import StatisticsSummary


class ArtifactStore(ABC):
    """
    Hand-off between the collector and the harvester.
    The identifier list is ordered; load_ids returns it in saved order.
    """

    @abstractmethod
    def save_ids(self, ids: list[str]) -> None:
        pass

    @abstractmethod
    def has_ids(self) -> bool:
        pass

    @abstractmethod
    def load_ids(self) -> list[str]:
        """Raises FileNotFoundError when no identifier list was saved."""
        pass

    @abstractmethod
    def save_results(self, results: list[FilteredOpportunity]) -> None:
        pass

    @abstractmethod
    def save_stats(self, stats: StatisticsSummary) -> None:
        pass
