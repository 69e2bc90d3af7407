from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional

from inquiry_desk.features.inquiries.utils.lifecycle import (
    GOAL_OTHER,
    goal_display,
    status_display,
)

# Choices offered by the intake form, in display order.
WEBSITE_GOAL_OPTIONS = [
    ("personal", "Personal Brand / Portfolio"),
    ("ecommerce", "Digital Commerce"),
    ("ai-tool", "Custom AI Integration"),
    (GOAL_OTHER, "Other Project Type"),
]


class IntakeFormError(ValueError):
    def __init__(self, missing: List[str]):
        super().__init__(f"Please complete: {', '.join(missing)}")
        self.missing = missing


@dataclass
class IntakeForm:
    """Client-side state of the project inquiry form."""

    full_name: str = ""
    email: str = ""
    whatsapp: str = ""
    business_name: str = ""
    niche: str = ""
    website_goal: str = ""
    other_goal: str = ""
    key_features: str = ""
    special_requests: str = ""
    reference_website: str = ""

    def missing_fields(self) -> List[str]:
        required = {
            "full_name": self.full_name,
            "email": self.email,
            "whatsapp": self.whatsapp,
            "business_name": self.business_name,
            "niche": self.niche,
            "website_goal": self.website_goal,
            "key_features": self.key_features,
        }
        if self.website_goal == GOAL_OTHER:
            required["other_goal"] = self.other_goal
        return [name for name, value in required.items() if not value.strip()]

    def to_payload(self) -> Dict[str, Any]:
        missing = self.missing_fields()
        if missing:
            raise IntakeFormError(missing)

        return {
            "fullName": self.full_name,
            "email": self.email,
            "whatsapp": self.whatsapp,
            "businessName": self.business_name,
            "niche": self.niche,
            "websiteGoal": self.website_goal,
            "websiteGoalOther": self.other_goal,
            "keyFeatures": self.key_features,
            "specialRequests": self.special_requests,
            "referenceStyle": self.reference_website,
        }

    def reset(self) -> None:
        for name in self.__dataclass_fields__:
            setattr(self, name, "")


@dataclass
class TrackedInquiry:
    """One row of the visitor-facing status tracker."""

    id: str
    business_name: str
    website_goal: str
    status: str
    created_at: datetime
    updated_at: Optional[datetime] = None
    website_goal_other: Optional[str] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "TrackedInquiry":
        updated_at = data.get("updated_at")
        return cls(
            id=data["id"],
            business_name=data["business_name"],
            website_goal=data["website_goal"],
            website_goal_other=data.get("website_goal_other"),
            status=data["status"],
            created_at=datetime.fromisoformat(data["created_at"]),
            updated_at=datetime.fromisoformat(updated_at) if updated_at else None,
        )

    @property
    def label(self) -> str:
        return status_display(self.status).visitor_label

    @property
    def message(self) -> str:
        return status_display(self.status).visitor_message

    @property
    def goal(self) -> str:
        return goal_display(self.website_goal, self.website_goal_other)
