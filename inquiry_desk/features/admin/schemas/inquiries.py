from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

from inquiry_desk.features.inquiries.models.inquiry import InquiryStatus
from inquiry_desk.features.inquiries.utils import lifecycle
from inquiry_desk.platform.schemas import APIResponse


class AdminInquiryOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    full_name: str
    email: str
    whatsapp: str
    business_name: str
    niche: str
    website_goal: str
    website_goal_other: Optional[str] = None
    key_features: Optional[str] = None
    special_requests: Optional[str] = None
    reference_style: Optional[str] = None
    status: InquiryStatus
    admin_notes: Optional[str] = None
    operator_notified: bool
    created_at: datetime
    updated_at: datetime

    @computed_field
    @property
    def goal_display(self) -> str:
        return lifecycle.goal_display(self.website_goal, self.website_goal_other)

    @computed_field
    @property
    def status_label(self) -> str:
        return lifecycle.status_display(self.status).admin_label


class StatusUpdateRequest(BaseModel):
    status: InquiryStatus


class NotesUpdateRequest(BaseModel):
    admin_notes: Optional[str] = None


class InquiryStatsOut(BaseModel):
    total: int
    pending: int = 0
    in_progress: int = Field(0, alias="in-progress")
    preview_sent: int = Field(0, alias="preview-sent")
    completed: int = 0
    cancelled: int = 0
    awaiting_notification: int = 0


class InquiryListResponse(APIResponse[List[AdminInquiryOut]]):
    pass


class InquiryDetailResponse(APIResponse[AdminInquiryOut]):
    pass
