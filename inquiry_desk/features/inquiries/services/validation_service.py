import re
from typing import Any, Dict, Optional, Tuple

from pydantic import ValidationError

from inquiry_desk.features.inquiries.schemas.inquiry import InquiryCreate
from inquiry_desk.platform.exceptions import ValidationFailed


class ValidationService:
    """Validation and normalization of the public intake and tracking inputs"""

    # local@domain.tld, nothing stricter
    EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

    REQUIRED_FIELDS = ("fullName", "email", "whatsapp", "businessName", "niche", "websiteGoal")
    OPTIONAL_FIELDS = ("websiteGoalOther", "keyFeatures", "specialRequests", "referenceStyle")

    @staticmethod
    def is_valid_email(email: str) -> bool:
        return bool(ValidationService.EMAIL_PATTERN.match(email))

    @staticmethod
    def normalize_email(email: str) -> str:
        return email.strip().lower()

    @staticmethod
    def check_inquiry(data: Any) -> Tuple[bool, Optional[str], Optional[Dict[str, Any]]]:
        if not isinstance(data, dict):
            return False, "Invalid request format", None

        normalized: Dict[str, Any] = {}
        for field in ValidationService.REQUIRED_FIELDS:
            value = data.get(field)
            if not isinstance(value, str) or not value.strip():
                return False, f"{field} is required for processing.", None
            normalized[field] = value.strip()

        if not ValidationService.is_valid_email(normalized["email"]):
            return False, "Please provide a valid contact email.", None
        normalized["email"] = normalized["email"].lower()

        for field in ValidationService.OPTIONAL_FIELDS:
            value = data.get(field)
            if value is None or value == "":
                continue
            if not isinstance(value, str):
                return False, f"{field} must be text.", None
            if value.strip():
                normalized[field] = value.strip()

        return True, None, normalized

    @staticmethod
    def validate_inquiry(data: Any) -> InquiryCreate:
        """Return the normalized inquiry or raise ValidationFailed naming the problem."""
        valid, error, normalized = ValidationService.check_inquiry(data)
        if not valid:
            raise ValidationFailed(error)

        try:
            return InquiryCreate.model_validate(normalized)
        except ValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(part) for part in first["loc"]) or "payload"
            raise ValidationFailed(f"{field} is invalid: {first['msg']}") from e

    @staticmethod
    def validate_tracking_email(data: Any) -> str:
        email = data.get("email") if isinstance(data, dict) else None
        if not email or not isinstance(email, str):
            raise ValidationFailed("Email is required")

        email = ValidationService.normalize_email(email)
        if not ValidationService.is_valid_email(email):
            raise ValidationFailed("Please enter a valid email address")
        return email
