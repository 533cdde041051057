"""Batch harvester for Simpler.Grants.gov opportunity metadata."""

__version__ = "0.1.0"
