from collections import deque
from dataclasses import dataclass
from typing import Any, Deque, Dict, List, Optional

from inquiry_desk.client.api import ApiError, InquiryDeskClient, SessionExpired


@dataclass
class Notice:
    """Transient toast shown to the operator."""

    title: str
    description: str = ""
    error: bool = False


class AdminConsole:
    """
    Local state of the admin dashboard.

    Every mutation is fire-and-confirm: the local list changes only after the
    server accepts the write. A failed write triggers a re-fetch. A lost
    session clears everything and raises SessionExpired.
    """

    def __init__(self, client: InquiryDeskClient):
        self.client = client
        self.inquiries: List[Dict[str, Any]] = []
        self.notices: Deque[Notice] = deque(maxlen=20)
        self.editing_notes: Optional[str] = None
        self.notes_draft: str = ""

    @property
    def authenticated(self) -> bool:
        return self.client.access_token is not None

    async def login(self, email: str, password: str) -> None:
        await self.client.login(email, password)
        await self.refresh()

    async def logout(self) -> None:
        try:
            await self.client.logout()
        except SessionExpired:
            pass
        self.inquiries = []

    async def refresh(self) -> List[Dict[str, Any]]:
        try:
            self.inquiries = await self.client.list_inquiries()
        except SessionExpired:
            self._drop_session()
            raise
        except ApiError as e:
            self.notices.append(Notice("Error loading orders", e.message, error=True))
        return self.inquiries

    def stats(self) -> Dict[str, int]:
        return {
            "total": len(self.inquiries),
            "pending": sum(1 for i in self.inquiries if i["status"] == "pending"),
            "in_progress": sum(1 for i in self.inquiries if i["status"] == "in-progress"),
            "completed": sum(1 for i in self.inquiries if i["status"] == "completed"),
        }

    async def set_status(self, inquiry_id: str, status: str) -> bool:
        try:
            updated = await self.client.update_status(inquiry_id, status)
        except SessionExpired:
            self._drop_session()
            raise
        except ApiError as e:
            self.notices.append(Notice("Update failed", e.message, error=True))
            await self.refresh()
            return False

        self._replace(updated)
        self.notices.append(Notice("Status updated", f"Order marked as {status}"))
        return True

    def start_editing_notes(self, inquiry_id: str) -> None:
        current = self._find(inquiry_id)
        self.editing_notes = inquiry_id
        self.notes_draft = (current or {}).get("admin_notes") or ""

    def cancel_editing_notes(self) -> None:
        self.editing_notes = None
        self.notes_draft = ""

    async def save_notes(self) -> bool:
        if self.editing_notes is None:
            return False

        try:
            updated = await self.client.update_notes(self.editing_notes, self.notes_draft)
        except SessionExpired:
            self._drop_session()
            raise
        except ApiError as e:
            self.notices.append(Notice("Save failed", e.message, error=True))
            await self.refresh()
            return False

        self._replace(updated)
        self.cancel_editing_notes()
        self.notices.append(Notice("Notes saved"))
        return True

    async def delete(self, inquiry_id: str, confirmed: bool = False) -> bool:
        """Irreversible; does nothing unless the operator confirmed."""
        if not confirmed:
            return False

        try:
            await self.client.delete_inquiry(inquiry_id)
        except SessionExpired:
            self._drop_session()
            raise
        except ApiError as e:
            self.notices.append(Notice("Delete failed", e.message, error=True))
            await self.refresh()
            return False

        self.inquiries = [i for i in self.inquiries if i["id"] != inquiry_id]
        self.notices.append(Notice("Order deleted"))
        return True

    def _find(self, inquiry_id: str) -> Optional[Dict[str, Any]]:
        return next((i for i in self.inquiries if i["id"] == inquiry_id), None)

    def _replace(self, updated: Dict[str, Any]) -> None:
        self.inquiries = [updated if i["id"] == updated["id"] else i for i in self.inquiries]

    def _drop_session(self) -> None:
        self.inquiries = []
        self.cancel_editing_notes()
