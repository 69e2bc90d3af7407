from inquiry_desk.client.admin_console import AdminConsole, Notice
from inquiry_desk.client.api import ApiError, InquiryDeskClient, SessionExpired
from inquiry_desk.client.forms import IntakeForm, IntakeFormError, TrackedInquiry

__all__ = [
    "AdminConsole",
    "ApiError",
    "InquiryDeskClient",
    "IntakeForm",
    "IntakeFormError",
    "Notice",
    "SessionExpired",
    "TrackedInquiry",
]
