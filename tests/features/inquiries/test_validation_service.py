import pytest

from conftest import VALID_INQUIRY
from inquiry_desk.features.inquiries.services.validation_service import ValidationService
from inquiry_desk.platform.exceptions import ValidationFailed


class TestEmailShape:
    @pytest.mark.parametrize(
        "email", ["a@b.com", "user.name+tag@example.co.uk", "x@y.z"]
    )
    def test_accepts(self, email):
        assert ValidationService.is_valid_email(email)

    @pytest.mark.parametrize(
        "email", ["", "plain", "a@b", "@b.com", "a@.com ", "a b@c.com", "a@@b.com"]
    )
    def test_rejects(self, email):
        assert not ValidationService.is_valid_email(email)


class TestCheckInquiry:
    def test_valid_payload(self):
        valid, error, normalized = ValidationService.check_inquiry(dict(VALID_INQUIRY))

        assert valid is True
        assert error is None
        assert normalized["email"] == "a@b.com"
        assert "keyFeatures" not in normalized

    def test_non_object(self):
        for payload in (None, [], "text", 5):
            assert ValidationService.check_inquiry(payload) == (
                False,
                "Invalid request format",
                None,
            )

    def test_non_string_required_field(self):
        valid, error, _ = ValidationService.check_inquiry({**VALID_INQUIRY, "niche": 7})
        assert valid is False
        assert error == "niche is required for processing."

    def test_non_string_optional_field(self):
        valid, error, _ = ValidationService.check_inquiry(
            {**VALID_INQUIRY, "keyFeatures": ["a", "b"]}
        )
        assert valid is False
        assert error == "keyFeatures must be text."

    def test_email_is_lower_cased(self):
        _, _, normalized = ValidationService.check_inquiry(
            {**VALID_INQUIRY, "email": " Mixed@Case.COM "}
        )
        assert normalized["email"] == "mixed@case.com"


class TestValidateInquiry:
    def test_returns_model(self):
        inquiry = ValidationService.validate_inquiry(
            {**VALID_INQUIRY, "specialRequests": " Fast please "}
        )

        assert inquiry.full_name == "A"
        assert inquiry.business_name == "Biz"
        assert inquiry.website_goal == "personal"
        assert inquiry.special_requests == "Fast please"
        assert inquiry.reference_style is None

    def test_raises_with_message(self):
        with pytest.raises(ValidationFailed) as exc_info:
            ValidationService.validate_inquiry({**VALID_INQUIRY, "email": "nope"})

        assert exc_info.value.message == "Please provide a valid contact email."
        assert exc_info.value.status_code == 400

    def test_overlong_field_is_rejected(self):
        with pytest.raises(ValidationFailed) as exc_info:
            ValidationService.validate_inquiry({**VALID_INQUIRY, "fullName": "x" * 5000})

        assert "fullName" in exc_info.value.message or "full_name" in exc_info.value.message


class TestValidateTrackingEmail:
    def test_normalizes(self):
        assert ValidationService.validate_tracking_email({"email": "  A@B.Com "}) == "a@b.com"

    @pytest.mark.parametrize("body", [None, [], {}, {"email": None}, {"email": ""}, {"email": 1}])
    def test_missing(self, body):
        with pytest.raises(ValidationFailed) as exc_info:
            ValidationService.validate_tracking_email(body)
        assert exc_info.value.message == "Email is required"

    def test_malformed(self):
        with pytest.raises(ValidationFailed) as exc_info:
            ValidationService.validate_tracking_email({"email": "nope"})
        assert exc_info.value.message == "Please enter a valid email address"


def test_long_free_text_fields_are_accepted():
    long_text = "Feature line\n" * 1000
    inquiry = ValidationService.validate_inquiry(
        {**VALID_INQUIRY, "keyFeatures": long_text, "specialRequests": long_text}
    )
    assert inquiry.key_features == long_text.strip()
    assert inquiry.special_requests == long_text.strip()
