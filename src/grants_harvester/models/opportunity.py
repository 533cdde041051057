"""Opportunity page, detail, and filtered-output models."""

from typing import Optional

from pydantic import BaseModel, Field


class OpportunityPage(BaseModel):
    """One page of search results: ids in server order plus the reported page count."""

    ids: list[str] = Field(default_factory=list)
    total_pages: int = 1


class AttachmentSummary(BaseModel):
    """Projection of a downloadable attachment kept for statistics."""

    mime_type: str = "unknown"
    file_description: str = ""


class OpportunityDetail(BaseModel):
    """
    Detail record for one opportunity, restricted to attachments that have a
    download path. download_path and file_description are only set when
    exactly one such attachment exists.
    """

    opportunity_id: str
    opportunity_title: Optional[str] = None
    attachment_count: int = 0
    mime_types: list[str] = Field(default_factory=list)
    attachments: list[AttachmentSummary] = Field(default_factory=list)

    download_path: Optional[str] = None
    file_description: Optional[str] = None

    @property
    def has_single_attachment(self) -> bool:
        return self.attachment_count == 1


class FilteredOpportunity(BaseModel):
    """Output row for an opportunity with exactly one downloadable attachment."""

    opportunity_id: str
    opportunity_title: Optional[str] = None
    download_path: Optional[str] = None
    file_description: str = ""

    @classmethod
    def from_detail(cls, detail: OpportunityDetail) -> "FilteredOpportunity":
        return cls(
            opportunity_id=detail.opportunity_id,
            opportunity_title=detail.opportunity_title,
            download_path=detail.download_path,
            file_description=detail.file_description or "",
        )
