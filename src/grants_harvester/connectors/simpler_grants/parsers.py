"""Parsers and request builders for Simpler.Grants.gov JSON payloads."""

from typing import Any, Optional

from grants_harvester.models.opportunity import (
    AttachmentSummary,
    OpportunityDetail,
    OpportunityPage,
)

from .constants import (
    FUNDING_INSTRUMENTS,
    OPPORTUNITY_STATUSES,
    SORT_DIRECTION,
    SORT_FIELD,
    UNKNOWN_MIME_TYPE,
)


def build_search_body(page_number: int, page_size: int) -> dict:
    """Search request body: posted grants, sorted ascending by opportunity id."""
    return {
        "filters": {
            "opportunity_status": {"one_of": list(OPPORTUNITY_STATUSES)},
            "funding_instrument": {"one_of": list(FUNDING_INSTRUMENTS)},
        },
        "pagination": {
            "page_offset": page_number,
            "page_size": page_size,
            "sort_order": [
                {"order_by": SORT_FIELD, "sort_direction": SORT_DIRECTION},
            ],
        },
    }


def page_from_search_response(payload: Any) -> OpportunityPage:
    """
    Map a search response to ids + total pages.
    Missing or zero total_pages is treated as a single page.
    """
    if not isinstance(payload, dict):
        return OpportunityPage(ids=[], total_pages=1)
    items = payload.get("data") or []
    ids = [str(item["opportunity_id"]) for item in items if item.get("opportunity_id") is not None]
    pagination = payload.get("pagination_info") or {}
    total_pages = pagination.get("total_pages") or 1
    return OpportunityPage(ids=ids, total_pages=int(total_pages))


def downloadable_attachments(attachments: Optional[list]) -> list[dict]:
    """
    Keep only attachments with a non-empty download_path.
    Raises ValueError when the list or an entry is not a JSON object.
    """
    if attachments is None:
        return []
    if not isinstance(attachments, list):
        raise ValueError(f"attachments must be a list, got {type(attachments).__name__}")
    for att in attachments:
        if att is not None and not isinstance(att, dict):
            raise ValueError(f"attachment entry must be an object, got {type(att).__name__}")
    return [att for att in attachments if att and att.get("download_path")]


def detail_from_response(payload: Any, opportunity_id: Optional[str] = None) -> Optional[OpportunityDetail]:
    """
    Map a detail response to OpportunityDetail.
    Returns None when the payload has no data object; raises ValueError when
    data is not an object. opportunity_id is used when the record omits its id.
    """
    data = payload.get("data") if isinstance(payload, dict) else None
    if not data:
        return None
    if not isinstance(data, dict):
        raise ValueError(f"detail data must be an object, got {type(data).__name__}")

    attachments = downloadable_attachments(data.get("attachments"))
    summaries = [
        AttachmentSummary(
            mime_type=att.get("mime_type") or UNKNOWN_MIME_TYPE,
            file_description=att.get("file_description") or "",
        )
        for att in attachments
    ]
    record_id = data.get("opportunity_id")
    if record_id is None:
        record_id = opportunity_id
    if record_id is None:
        raise ValueError("detail data has no opportunity_id")
    detail = OpportunityDetail(
        opportunity_id=str(record_id),
        opportunity_title=data.get("opportunity_title"),
        attachment_count=len(attachments),
        mime_types=[s.mime_type for s in summaries],
        attachments=summaries,
    )
    # Promote the sole attachment so filtered output keeps its flat shape
    if detail.attachment_count == 1:
        detail.download_path = attachments[0]["download_path"]
        detail.file_description = attachments[0].get("file_description") or ""
    return detail
