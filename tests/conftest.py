"""
Test configuration and fixtures for the Inquiry Desk API.

Points the app at a throwaway SQLite database, creates the schema once,
empties the tables between tests and replaces outbound email with a mock.
"""

import asyncio
import os
import tempfile
from typing import Generator
from unittest.mock import patch

import pytest
from dotenv import load_dotenv
from fastapi.testclient import TestClient

load_dotenv()

test_db_path = os.path.join(tempfile.mkdtemp(), "inquiry_desk_test.db")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{test_db_path}"
os.environ["EMAIL_API_KEY"] = ""
os.environ["ENFORCE_STATUS_TRANSITIONS"] = "false"
os.environ["RATE_LIMIT_BACKEND"] = "memory"

from sqlalchemy import delete  # noqa: E402

from inquiry_desk.features.admin.models.admin import Admin  # noqa: E402
from inquiry_desk.features.admin.services.auth import AdminAuthService  # noqa: E402
from inquiry_desk.features.inquiries.models.inquiry import Inquiry  # noqa: E402
from inquiry_desk.platform.db.base import Base  # noqa: E402
from inquiry_desk.platform.db.session import SessionLocal, engine  # noqa: E402
from inquiry_desk.platform.utils.rate_limit import get_track_rate_limiter  # noqa: E402

ADMIN_EMAIL = "owner@example.com"
ADMIN_PASSWORD = "Sup3r-Secret!"

VALID_INQUIRY = {
    "fullName": "A",
    "email": "a@b.com",
    "whatsapp": "123",
    "businessName": "Biz",
    "niche": "Retail",
    "websiteGoal": "personal",
}


def run(coro):
    """Run a coroutine to completion from synchronous test code."""
    return asyncio.run(coro)


async def _create_schema():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def _clear_tables():
    async with SessionLocal() as session:
        await session.execute(delete(Inquiry))
        await session.execute(delete(Admin))
        await session.commit()


@pytest.fixture(scope="session", autouse=True)
def database():
    run(_create_schema())
    yield
    if os.path.exists(test_db_path):
        os.remove(test_db_path)


@pytest.fixture(autouse=True)
def clean_state(database):
    run(_clear_tables())
    get_track_rate_limiter().reset()
    yield


@pytest.fixture(autouse=True)
def mock_send_email():
    """Every outbound email goes through this mock."""
    with patch(
        "inquiry_desk.features.inquiries.services.notification_service.send_email"
    ) as mocked:
        mocked.return_value = {"id": "email_123"}
        yield mocked


@pytest.fixture(scope="session")
def test_app():
    from inquiry_desk.main import app

    return app


@pytest.fixture
def client(test_app) -> Generator[TestClient, None, None]:
    with TestClient(test_app) as test_client:
        yield test_client


@pytest.fixture
def admin_account():
    async def _create():
        async with SessionLocal() as session:
            return await AdminAuthService(session).create_admin(ADMIN_EMAIL, ADMIN_PASSWORD)

    return run(_create())


@pytest.fixture
def admin_headers(client, admin_account):
    response = client.post(
        "/api/v1/admin/auth/login",
        json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD},
    )
    assert response.status_code == 200
    token = response.json()["data"]["access_token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def submit(client):
    """Submit an inquiry and return its id."""

    def _submit(**overrides):
        payload = {**VALID_INQUIRY, **overrides}
        response = client.post("/api/v1/submit-order", json=payload)
        assert response.status_code == 200, response.text
        return response.json()["inquiryId"]

    return _submit


def fetch_inquiry(inquiry_id: str):
    async def _get():
        async with SessionLocal() as session:
            return await session.get(Inquiry, inquiry_id)

    return run(_get())


def count_inquiries() -> int:
    from sqlalchemy import func, select

    async def _count():
        async with SessionLocal() as session:
            return await session.scalar(select(func.count(Inquiry.id)))

    return run(_count())
