from typing import Any, Dict, List, Optional

import httpx

from inquiry_desk.client.forms import IntakeForm, TrackedInquiry


class ApiError(Exception):
    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class SessionExpired(ApiError):
    """The admin session is missing or no longer valid; show the login screen."""


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or "Request failed"
    if isinstance(body, dict):
        return body.get("error") or body.get("message") or "Request failed"
    return "Request failed"


class InquiryDeskClient:
    """
    HTTP client used by the intake form, the status tracker and the admin console.

    Nothing is retried automatically; every failure raises ApiError and the
    caller decides what to show.
    """

    def __init__(
        self,
        base_url: str,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = 10.0,
    ):
        self._http = httpx.AsyncClient(base_url=base_url, transport=transport, timeout=timeout)
        self.access_token: Optional[str] = None

    async def __aenter__(self) -> "InquiryDeskClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _request(self, method: str, url: str, *, admin: bool = False, **kwargs) -> Any:
        headers = kwargs.pop("headers", {})
        if admin:
            if not self.access_token:
                raise SessionExpired(401, "Not authenticated")
            headers["Authorization"] = f"Bearer {self.access_token}"

        try:
            response = await self._http.request(method, url, headers=headers, **kwargs)
        except httpx.HTTPError as e:
            # No HTTP status; 0 marks a transport failure
            raise ApiError(0, str(e) or "Network error") from e

        if admin and response.status_code in (401, 403):
            self.access_token = None
            raise SessionExpired(response.status_code, _error_message(response))
        if response.is_error:
            raise ApiError(response.status_code, _error_message(response))
        return response.json()

    # ── Public ──────────────────────────────────

    async def submit_inquiry(self, form: IntakeForm) -> str:
        body = await self._request("POST", "/api/v1/submit-order", json=form.to_payload())
        return body["inquiryId"]

    async def track(self, email: str) -> List[TrackedInquiry]:
        body = await self._request("POST", "/api/v1/track-order", json={"email": email})
        return [TrackedInquiry.from_api(row) for row in body["orders"]]

    async def ask_assistant(self, message: str) -> str:
        body = await self._request("POST", "/api/v1/assistant/reply", json={"message": message})
        return body["data"]["reply"]

    # ── Admin ───────────────────────────────────

    async def login(self, email: str, password: str) -> Dict[str, Any]:
        body = await self._request(
            "POST", "/api/v1/admin/auth/login", json={"email": email, "password": password}
        )
        self.access_token = body["data"]["access_token"]
        return body["data"]["admin"]

    async def logout(self) -> None:
        try:
            await self._request("POST", "/api/v1/admin/auth/logout", admin=True)
        finally:
            self.access_token = None

    async def list_inquiries(self) -> List[Dict[str, Any]]:
        body = await self._request("GET", "/api/v1/admin/inquiries", admin=True)
        return body["data"]

    async def inquiry_stats(self) -> Dict[str, int]:
        body = await self._request("GET", "/api/v1/admin/inquiries/stats", admin=True)
        return body["data"]

    async def update_status(self, inquiry_id: str, status: str) -> Dict[str, Any]:
        body = await self._request(
            "PATCH", f"/api/v1/admin/inquiries/{inquiry_id}/status", admin=True, json={"status": status}
        )
        return body["data"]

    async def update_notes(self, inquiry_id: str, notes: Optional[str]) -> Dict[str, Any]:
        body = await self._request(
            "PATCH",
            f"/api/v1/admin/inquiries/{inquiry_id}/notes",
            admin=True,
            json={"admin_notes": notes},
        )
        return body["data"]

    async def delete_inquiry(self, inquiry_id: str) -> None:
        await self._request(
            "DELETE",
            f"/api/v1/admin/inquiries/{inquiry_id}",
            admin=True,
            params={"confirm": "true"},
        )

    async def resend_notification(self, inquiry_id: str) -> Dict[str, Any]:
        body = await self._request("POST", f"/api/v1/admin/inquiries/{inquiry_id}/notify", admin=True)
        return body["data"]
