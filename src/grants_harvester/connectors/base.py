"""Abstract base class for opportunity API connectors."""

from abc import ABC, abstractmethod
from typing import Optional

from grants_harvester.models.opportunity import OpportunityDetail, OpportunityPage


class BaseConnector(ABC):
    """
    Standard interface used by the collector and the harvester.
    Implementations raise on transport or HTTP errors; callers decide
    whether an error aborts or skips.
    """

    @abstractmethod
    def search_page(self, page_number: int, page_size: int) -> OpportunityPage:
        """
        Fetch one page (1-based) of opportunity ids plus the total page count.
        """
        pass

    @abstractmethod
    def fetch_details(self, opportunity_id: str) -> Optional[OpportunityDetail]:
        """
        Fetch the detail record for one id; None when the API returns no data.
        """
        pass

    def close(self) -> None:
        """Release network resources. Default: nothing to release."""

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def error_details(exc: Exception) -> Optional[str]:
    """Response body of a failed HTTP call, when the server answered."""
    response = getattr(exc, "response", None)
    if response is None:
        return None
    return response.text or None
