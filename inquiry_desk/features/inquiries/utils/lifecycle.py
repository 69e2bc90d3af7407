"""
Display tables and the allowed-transitions table for the inquiry lifecycle.

pending -> in-progress -> preview-sent -> completed, with cancelled reachable
from any non-terminal state. The admin console and the visitor-facing status
tracker both read STATUS_DISPLAY so the two views cover the same status set.
"""

from typing import Dict, FrozenSet, NamedTuple, Optional, Union

from inquiry_desk.features.inquiries.models.inquiry import InquiryStatus


class StatusDisplay(NamedTuple):
    admin_label: str
    visitor_label: str
    visitor_message: str


STATUS_DISPLAY: Dict[InquiryStatus, StatusDisplay] = {
    InquiryStatus.PENDING: StatusDisplay(
        "Pending",
        "Reviewing",
        "I've received your requirements and I'm currently reviewing the technical scope.",
    ),
    InquiryStatus.IN_PROGRESS: StatusDisplay(
        "In Progress",
        "In Development",
        "The build is currently in development. I'm focusing on the core integration features.",
    ),
    InquiryStatus.PREVIEW_SENT: StatusDisplay(
        "Preview Sent",
        "Ready for Review",
        "A live preview is ready. Please check your email for the link and let me know your thoughts.",
    ),
    InquiryStatus.COMPLETED: StatusDisplay(
        "Completed",
        "Live & Deployed",
        "The project is complete and fully deployed. I've sent the final access details to your inbox.",
    ),
    InquiryStatus.CANCELLED: StatusDisplay(
        "Cancelled",
        "Archived",
        "This inquiry has been closed or archived.",
    ),
}

TERMINAL_STATUSES: FrozenSet[InquiryStatus] = frozenset(
    {InquiryStatus.COMPLETED, InquiryStatus.CANCELLED}
)

ALLOWED_TRANSITIONS: Dict[InquiryStatus, FrozenSet[InquiryStatus]] = {
    InquiryStatus.PENDING: frozenset({InquiryStatus.IN_PROGRESS, InquiryStatus.CANCELLED}),
    InquiryStatus.IN_PROGRESS: frozenset({InquiryStatus.PREVIEW_SENT, InquiryStatus.CANCELLED}),
    InquiryStatus.PREVIEW_SENT: frozenset(
        {InquiryStatus.IN_PROGRESS, InquiryStatus.COMPLETED, InquiryStatus.CANCELLED}
    ),
    InquiryStatus.COMPLETED: frozenset(),
    InquiryStatus.CANCELLED: frozenset(),
}

GOAL_OTHER = "other"

GOAL_LABELS: Dict[str, str] = {
    "personal": "Personal Website / Landing Page",
    "ecommerce": "Ecommerce / Online Store",
    "ai-tool": "AI Automation Tool",
}


def coerce_status(value: Union[str, InquiryStatus, None]) -> Optional[InquiryStatus]:
    try:
        return InquiryStatus(value)
    except ValueError:
        return None


def status_display(value: Union[str, InquiryStatus, None]) -> StatusDisplay:
    """Unknown statuses fall back to the pending presentation."""
    status = coerce_status(value) or InquiryStatus.PENDING
    return STATUS_DISPLAY[status]


def is_transition_allowed(current: InquiryStatus, new: InquiryStatus) -> bool:
    if current == new:
        return True
    return new in ALLOWED_TRANSITIONS[current]


def goal_display(website_goal: str, website_goal_other: Optional[str] = None) -> str:
    if website_goal == GOAL_OTHER and website_goal_other:
        return website_goal_other
    return GOAL_LABELS.get(website_goal, website_goal)
