"""Simpler.Grants.gov connector."""

from .connector import SimplerGrantsConnector

__all__ = ["SimplerGrantsConnector"]
