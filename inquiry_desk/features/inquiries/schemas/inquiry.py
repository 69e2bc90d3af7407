from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from inquiry_desk.features.inquiries.models.inquiry import InquiryStatus


class InquiryCreate(BaseModel):
    """Normalized intake payload. Accepts the camelCase wire names."""

    model_config = ConfigDict(populate_by_name=True)

    full_name: str = Field(..., alias="fullName", max_length=255)
    email: str = Field(..., max_length=255)
    whatsapp: str = Field(..., max_length=50)
    business_name: str = Field(..., alias="businessName", max_length=255)
    niche: str = Field(..., max_length=255)
    website_goal: str = Field(..., alias="websiteGoal", max_length=100)
    website_goal_other: Optional[str] = Field(None, alias="websiteGoalOther")
    key_features: Optional[str] = Field(None, alias="keyFeatures")
    special_requests: Optional[str] = Field(None, alias="specialRequests")
    reference_style: Optional[str] = Field(None, alias="referenceStyle")


class SubmitInquiryResponse(BaseModel):
    success: bool = True
    inquiryId: str


class TrackRequest(BaseModel):
    email: str


class TrackedInquiryOut(BaseModel):
    """Public view of an inquiry: no contact details, notes or free-text brief."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    business_name: str
    website_goal: str
    website_goal_other: Optional[str] = None
    status: InquiryStatus
    created_at: datetime
    updated_at: datetime


class TrackResponse(BaseModel):
    orders: List[TrackedInquiryOut]
