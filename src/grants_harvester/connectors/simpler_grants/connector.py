"""Simpler.Grants.gov connector.

Two endpoints are used:
1. Search: POST /v1/opportunities/search with status/instrument filters and
   pagination; returns `data` (list) and `pagination_info.total_pages`
2. Detail: GET /v1/opportunities/{id}; returns a `data` object with
   opportunity_id, opportunity_title and attachments

Both require the static API key in the X-API-Key header.
"""

import logging
from typing import Optional

import httpx

from grants_harvester.config import HarvesterConfig
from grants_harvester.connectors.base import BaseConnector
from grants_harvester.models.opportunity import OpportunityDetail, OpportunityPage

from .constants import API_KEY_HEADER, DETAIL_PATH_TEMPLATE, SEARCH_PATH
from .parsers import build_search_body, detail_from_response, page_from_search_response

logger = logging.getLogger(__name__)


class SimplerGrantsConnector(BaseConnector):
    """
    Connector for the Simpler.Grants.gov v1 API.
    Errors are not caught here: httpx.HTTPStatusError for non-2xx responses,
    httpx.RequestError for transport failures, ValueError for bad JSON or a
    malformed detail record.
    """

    DEFAULT_HEADERS = {
        "User-Agent": "grants-harvester/0.1",
        "Accept": "application/json",
    }

    def __init__(
        self,
        config: Optional[HarvesterConfig] = None,
        client: Optional[httpx.Client] = None,
    ):
        """
        Args:
            config: API key, base URL and timeout; defaults to HarvesterConfig.from_env()
            client: Optional httpx client (not closed by close())
        """
        self._config = config or HarvesterConfig.from_env()
        self._owns_client = client is None
        headers = dict(self.DEFAULT_HEADERS)
        if self._config.api_key:
            headers[API_KEY_HEADER] = self._config.api_key
        if client is None:
            client = httpx.Client(
                timeout=self._config.timeout,
                follow_redirects=True,
                headers=headers,
            )
        else:
            client.headers.update(headers)
        self._client = client

    def _url(self, path: str) -> str:
        return self._config.base_url.rstrip("/") + path

    def search_page(self, page_number: int, page_size: int) -> OpportunityPage:
        """POST one search page and return its ids and the reported total pages."""
        resp = self._client.post(
            self._url(SEARCH_PATH),
            json=build_search_body(page_number, page_size),
        )
        resp.raise_for_status()
        return page_from_search_response(resp.json())

    def fetch_details(self, opportunity_id: str) -> Optional[OpportunityDetail]:
        """GET one opportunity; None when the response carries no data."""
        resp = self._client.get(
            self._url(DETAIL_PATH_TEMPLATE.format(opportunity_id=opportunity_id)),
        )
        resp.raise_for_status()
        detail = detail_from_response(resp.json(), opportunity_id)
        if detail is None:
            logger.debug("No data in detail response for %s", opportunity_id)
        return detail

    def close(self) -> None:
        if self._owns_client:
            self._client.close()
