"""Pytest fixtures for grants-harvester tests."""

from typing import Optional

import httpx
import pytest

from grants_harvester.config import HarvesterConfig
from grants_harvester.connectors.base import BaseConnector
from grants_harvester.connectors.simpler_grants.parsers import detail_from_response
from grants_harvester.models.opportunity import OpportunityDetail, OpportunityPage
from grants_harvester.pacing import NoPacer
from grants_harvester.store import JsonArtifactStore


class FakeConnector(BaseConnector):
    """
    In-memory connector. pages: page number -> OpportunityPage;
    details: id -> raw detail payload; failing_*: raise ConnectError;
    errors: id -> exception raised by fetch_details.
    """

    def __init__(
        self,
        pages: Optional[dict[int, OpportunityPage]] = None,
        details: Optional[dict[str, dict]] = None,
        failing_pages: Optional[set[int]] = None,
        failing_ids: Optional[set[str]] = None,
        errors: Optional[dict[str, Exception]] = None,
    ):
        self.pages = pages or {}
        self.details = details or {}
        self.failing_pages = failing_pages or set()
        self.failing_ids = failing_ids or set()
        self.errors = errors or {}
        self.page_calls: list[tuple[int, int]] = []
        self.detail_calls: list[str] = []
        self.closed = False

    def search_page(self, page_number: int, page_size: int) -> OpportunityPage:
        self.page_calls.append((page_number, page_size))
        if page_number in self.failing_pages:
            raise httpx.ConnectError("connection refused")
        return self.pages.get(page_number, OpportunityPage(ids=[], total_pages=1))

    def fetch_details(self, opportunity_id: str) -> Optional[OpportunityDetail]:
        self.detail_calls.append(opportunity_id)
        if opportunity_id in self.failing_ids:
            raise httpx.ConnectError("connection reset")
        if opportunity_id in self.errors:
            raise self.errors[opportunity_id]
        return detail_from_response(self.details.get(opportunity_id, {"data": None}), opportunity_id)

    def close(self) -> None:
        self.closed = True


def detail_payload(opportunity_id: str, title: str, attachments: list[dict]) -> dict:
    """Detail response body as returned by the API."""
    return {
        "data": {
            "opportunity_id": opportunity_id,
            "opportunity_title": title,
            "attachments": attachments,
        },
        "status_code": 200,
    }


@pytest.fixture
def fake_connector_cls() -> type[FakeConnector]:
    return FakeConnector


@pytest.fixture
def make_detail_payload():
    return detail_payload


@pytest.fixture
def config(tmp_path) -> HarvesterConfig:
    """Config pointing at a temp data dir with a fake key."""
    return HarvesterConfig(api_key="test-key", data_dir=tmp_path / "data")


@pytest.fixture
def store(config: HarvesterConfig) -> JsonArtifactStore:
    return JsonArtifactStore(config.data_dir)


@pytest.fixture
def pacer() -> NoPacer:
    return NoPacer()


@pytest.fixture
def sample_details() -> dict[str, dict]:
    """Three opportunities: one single-attachment, one with two pdfs, one with none."""
    return {
        "101": detail_payload(
            "101",
            "Rural Health Outreach",
            [
                {
                    "mime_type": "application/pdf",
                    "file_description": "Full announcement",
                    "download_path": "https://files.example.gov/101/nofo.pdf",
                }
            ],
        ),
        "102": detail_payload(
            "102",
            "STEM Education Grants",
            [
                {"mime_type": "application/pdf", "file_description": "NOFO", "download_path": "https://x/a.pdf"},
                {"mime_type": "application/pdf", "file_description": "FAQ", "download_path": "https://x/b.pdf"},
                {"mime_type": "application/msword", "file_description": "Form", "download_path": ""},
            ],
        ),
        "103": detail_payload("103", "Forecast Only", []),
    }
