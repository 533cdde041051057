"""Source connectors for the opportunity API."""

from grants_harvester.connectors.base import BaseConnector, error_details
from grants_harvester.connectors.simpler_grants import SimplerGrantsConnector

__all__ = ["BaseConnector", "SimplerGrantsConnector", "error_details"]
