import uuid
from unittest.mock import MagicMock, patch

import pytest
import requests
from sqlalchemy.exc import OperationalError

from conftest import VALID_INQUIRY, count_inquiries, fetch_inquiry
from inquiry_desk.platform.config import settings
from inquiry_desk.platform.exceptions import EmailDeliveryError
from inquiry_desk.platform.services import email as email_service


def test_submit_order_success(client, mock_send_email):
    response = client.post("/api/v1/submit-order", json=VALID_INQUIRY)

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert uuid.UUID(data["inquiryId"])

    inquiry = fetch_inquiry(data["inquiryId"])
    assert inquiry.status == "pending"
    assert inquiry.business_name == "Biz"
    assert inquiry.operator_notified is True
    assert inquiry.created_at is not None

    # Operator first, then the submitter
    assert mock_send_email.call_count == 2
    operator_call, client_call = mock_send_email.call_args_list
    assert operator_call.args[0] == ["areeshaabbas07@gmail.com"]
    assert operator_call.args[1] == "New Project: Biz"
    assert client_call.args[0] == ["a@b.com"]
    assert data["inquiryId"] in client_call.args[2]


def test_submit_order_ids_are_unique(submit):
    ids = {submit() for _ in range(5)}
    assert len(ids) == 5


def test_submit_order_normalizes_fields(client):
    payload = {
        "fullName": "  Jane Doe ",
        "email": "  User@Example.com ",
        "whatsapp": " +1 555 0100 ",
        "businessName": " Jane's Bakery ",
        "niche": " Food ",
        "websiteGoal": " other ",
        "websiteGoalOther": "  Booking site  ",
        "keyFeatures": "   ",
        "specialRequests": "",
    }

    response = client.post("/api/v1/submit-order", json=payload)
    assert response.status_code == 200

    inquiry = fetch_inquiry(response.json()["inquiryId"])
    assert inquiry.full_name == "Jane Doe"
    assert inquiry.email == "user@example.com"
    assert inquiry.whatsapp == "+1 555 0100"
    assert inquiry.business_name == "Jane's Bakery"
    assert inquiry.website_goal == "other"
    assert inquiry.website_goal_other == "Booking site"
    assert inquiry.key_features is None
    assert inquiry.special_requests is None
    assert inquiry.reference_style is None


@pytest.mark.parametrize(
    "field", ["fullName", "email", "whatsapp", "businessName", "niche", "websiteGoal"]
)
@pytest.mark.parametrize("value", [None, "", "   "])
def test_submit_order_requires_field(client, mock_send_email, field, value):
    payload = dict(VALID_INQUIRY)
    if value is None:
        payload.pop(field)
    else:
        payload[field] = value

    response = client.post("/api/v1/submit-order", json=payload)

    assert response.status_code == 400
    assert response.json() == {"error": f"{field} is required for processing."}
    assert count_inquiries() == 0
    mock_send_email.assert_not_called()


def test_submit_order_first_missing_field_is_reported(client):
    response = client.post("/api/v1/submit-order", json={"niche": "Retail"})

    assert response.status_code == 400
    assert response.json()["error"] == "fullName is required for processing."


def test_submit_order_rejects_malformed_email(client, mock_send_email):
    response = client.post("/api/v1/submit-order", json={**VALID_INQUIRY, "email": "not-an-email"})

    assert response.status_code == 400
    assert response.json() == {"error": "Please provide a valid contact email."}
    assert count_inquiries() == 0
    mock_send_email.assert_not_called()


def test_submit_order_rejects_non_object_body(client):
    response = client.post("/api/v1/submit-order", json=["not", "an", "object"])
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid request format"}

    response = client.post(
        "/api/v1/submit-order",
        content="{broken json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid request format"}


def test_submit_order_store_failure_sends_no_email(client, mock_send_email):
    with patch(
        "sqlalchemy.ext.asyncio.AsyncSession.commit",
        side_effect=OperationalError("INSERT", {}, Exception("database is down")),
    ):
        response = client.post("/api/v1/submit-order", json=VALID_INQUIRY)

    assert response.status_code == 500
    assert response.json() == {"error": "Database synchronization failed."}
    mock_send_email.assert_not_called()
    assert count_inquiries() == 0


def test_submit_order_operator_email_failure_surfaces_but_keeps_record(client, mock_send_email):
    mock_send_email.side_effect = EmailDeliveryError("Email dispatch failed: invalid api key")

    response = client.post("/api/v1/submit-order", json=VALID_INQUIRY)

    assert response.status_code == 500
    assert response.json() == {"error": "Email dispatch failed: invalid api key"}
    # The record was written before the notification was attempted
    assert count_inquiries() == 1
    assert mock_send_email.call_count == 1


def test_submit_order_confirmation_failure_is_swallowed(client, mock_send_email):
    mock_send_email.side_effect = [{"id": "operator"}, EmailDeliveryError("domain not verified")]

    response = client.post("/api/v1/submit-order", json=VALID_INQUIRY)

    assert response.status_code == 200
    inquiry = fetch_inquiry(response.json()["inquiryId"])
    assert inquiry.operator_notified is True
    assert mock_send_email.call_count == 2


def test_submit_order_escapes_html_in_emails(client, mock_send_email):
    response = client.post(
        "/api/v1/submit-order",
        json={**VALID_INQUIRY, "businessName": "<script>alert(1)</script>"},
    )

    assert response.status_code == 200
    operator_html = mock_send_email.call_args_list[0].args[2]
    assert "<script>" not in operator_html
    assert "&lt;script&gt;" in operator_html


def test_submit_order_tolerates_empty_email_api_body(client, mock_send_email):
    accepted = MagicMock()
    accepted.status_code = 200
    accepted.json.side_effect = requests.exceptions.JSONDecodeError("Expecting value", "", 0)
    mock_send_email.side_effect = email_service.send_email

    with patch.object(settings, "EMAIL_API_KEY", "re_test_key"), patch(
        "inquiry_desk.platform.services.email.requests.post", return_value=accepted
    ) as mock_post:
        response = client.post("/api/v1/submit-order", json=VALID_INQUIRY)

    assert response.status_code == 200
    assert mock_post.call_count == 2
    inquiry = fetch_inquiry(response.json()["inquiryId"])
    assert inquiry.operator_notified is True
