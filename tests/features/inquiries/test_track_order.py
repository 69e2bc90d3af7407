import uuid
from unittest.mock import patch

from sqlalchemy.exc import OperationalError

from conftest import VALID_INQUIRY

PUBLIC_FIELDS = {
    "id",
    "business_name",
    "website_goal",
    "website_goal_other",
    "status",
    "created_at",
    "updated_at",
}


def test_end_to_end_submit_then_track(client):
    response = client.post("/api/v1/submit-order", json=VALID_INQUIRY)
    assert response.status_code == 200
    inquiry_id = response.json()["inquiryId"]
    assert uuid.UUID(inquiry_id)

    response = client.post("/api/v1/track-order", json={"email": "a@b.com"})

    assert response.status_code == 200
    orders = response.json()["orders"]
    assert len(orders) == 1
    assert orders[0]["id"] == inquiry_id
    assert orders[0]["status"] == "pending"
    assert orders[0]["business_name"] == "Biz"


def test_track_order_returns_only_public_fields(client, submit):
    submit(
        keyFeatures="Payments",
        specialRequests="Dark mode",
        referenceStyle="https://example.com",
    )

    orders = client.post("/api/v1/track-order", json={"email": "a@b.com"}).json()["orders"]

    assert set(orders[0].keys()) == PUBLIC_FIELDS
    for private in ("full_name", "email", "whatsapp", "admin_notes", "key_features"):
        assert private not in orders[0]


def test_track_order_is_case_insensitive(client, submit):
    inquiry_id = submit(email="User@Example.com")

    for query in ("user@example.com", "User@Example.com", "  USER@example.COM  "):
        orders = client.post("/api/v1/track-order", json={"email": query}).json()["orders"]
        assert [o["id"] for o in orders] == [inquiry_id]


def test_track_order_unknown_email_returns_empty_list(client):
    response = client.post("/api/v1/track-order", json={"email": "nobody@example.com"})

    assert response.status_code == 200
    assert response.json() == {"orders": []}


def test_track_order_newest_first_and_capped_at_ten(client, submit):
    ids = [submit(businessName=f"Biz {i}") for i in range(12)]
    submit(email="someone-else@example.com")

    orders = client.post("/api/v1/track-order", json={"email": "a@b.com"}).json()["orders"]

    assert len(orders) == 10
    assert [o["id"] for o in orders] == list(reversed(ids))[:10]


def test_track_order_invalid_email(client):
    response = client.post("/api/v1/track-order", json={"email": "not-an-email"})
    assert response.status_code == 400
    assert response.json() == {"error": "Please enter a valid email address"}


def test_track_order_missing_email(client):
    for body in ({}, {"email": ""}, {"email": 42}):
        response = client.post("/api/v1/track-order", json=body)
        assert response.status_code == 400
        assert response.json() == {"error": "Email is required"}


def test_track_order_invalid_json(client):
    response = client.post(
        "/api/v1/track-order",
        content="not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid request"}


def test_track_order_invalid_email_does_not_touch_store(client):
    with patch(
        "inquiry_desk.features.inquiries.routes.track.InquiryService.find_by_email"
    ) as mock_find:
        response = client.post("/api/v1/track-order", json={"email": "bad"})

    assert response.status_code == 400
    mock_find.assert_not_called()


def test_track_order_store_failure(client):
    with patch(
        "sqlalchemy.ext.asyncio.AsyncSession.execute",
        side_effect=OperationalError("SELECT", {}, Exception("connection lost")),
    ):
        response = client.post("/api/v1/track-order", json={"email": "a@b.com"})

    assert response.status_code == 500
    assert response.json() == {"error": "Could not retrieve status at this time"}
