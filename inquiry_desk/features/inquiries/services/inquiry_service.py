from typing import Dict, List, Optional

from fastapi import HTTPException, status
from sqlalchemy import case, delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from inquiry_desk.features.inquiries.models.inquiry import Inquiry, InquiryStatus
from inquiry_desk.features.inquiries.schemas.inquiry import InquiryCreate
from inquiry_desk.features.inquiries.utils.lifecycle import STATUS_DISPLAY, is_transition_allowed
from inquiry_desk.platform.config import settings
from inquiry_desk.platform.exceptions import StoreError
from inquiry_desk.platform.logger import get_logger

logger = get_logger("inquiry_service")


class InquiryService:
    """Reads and writes against the inquiry store"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_inquiry(self, data: InquiryCreate, inquiry_id: str) -> Inquiry:
        inquiry = Inquiry(
            id=inquiry_id,
            **data.model_dump(),
            status=InquiryStatus.PENDING,
            operator_notified=False,
        )
        self.db.add(inquiry)

        try:
            await self.db.commit()
            await self.db.refresh(inquiry)
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Failed to store inquiry {inquiry_id}: {e}")
            raise StoreError("Database synchronization failed.") from e

        logger.info(f"Inquiry {inquiry.id} stored for {inquiry.business_name}")
        return inquiry

    async def find_by_email(self, email: str, limit: Optional[int] = None) -> List[Inquiry]:
        """Newest-first inquiries for an already-normalized email."""
        stmt = (
            select(Inquiry)
            .where(Inquiry.email == email)
            .order_by(Inquiry.created_at.desc())
            .limit(limit or settings.TRACK_RESULT_LIMIT)
        )
        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as e:
            logger.error(f"Status lookup query failed: {e}")
            raise StoreError("Could not retrieve status at this time") from e
        return list(result.scalars().all())

    async def list_inquiries(self) -> List[Inquiry]:
        result = await self.db.execute(select(Inquiry).order_by(Inquiry.created_at.desc()))
        return list(result.scalars().all())

    async def get_inquiry(self, inquiry_id: str) -> Inquiry:
        inquiry = await self.db.get(Inquiry, inquiry_id)
        if inquiry is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Inquiry not found")
        return inquiry

    async def update_status(self, inquiry_id: str, new_status: InquiryStatus) -> Inquiry:
        inquiry = await self.get_inquiry(inquiry_id)
        current = InquiryStatus(inquiry.status)

        if settings.ENFORCE_STATUS_TRANSITIONS and not is_transition_allowed(current, new_status):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"Cannot move inquiry from {current.value} to {new_status.value}",
            )

        inquiry.status = new_status
        await self.db.commit()
        await self.db.refresh(inquiry)
        logger.info(f"Inquiry {inquiry_id} marked as {new_status.value}")
        return inquiry

    async def update_notes(self, inquiry_id: str, admin_notes: Optional[str]) -> Inquiry:
        inquiry = await self.get_inquiry(inquiry_id)
        inquiry.admin_notes = admin_notes
        await self.db.commit()
        await self.db.refresh(inquiry)
        logger.info(f"Notes saved for inquiry {inquiry_id}")
        return inquiry

    async def mark_notified(self, inquiry: Inquiry) -> Inquiry:
        inquiry.operator_notified = True
        await self.db.commit()
        await self.db.refresh(inquiry)
        return inquiry

    async def delete_inquiry(self, inquiry_id: str) -> bool:
        result = await self.db.execute(delete(Inquiry).where(Inquiry.id == inquiry_id))
        if result.rowcount == 0:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Inquiry not found")
        await self.db.commit()
        logger.info(f"Inquiry {inquiry_id} deleted")
        return True

    async def get_stats(self) -> Dict[str, int]:
        counts = {
            s.value: func.coalesce(func.sum(case((Inquiry.status == s, 1), else_=0)), 0)
            for s in STATUS_DISPLAY
        }
        stmt = select(
            func.count(Inquiry.id),
            func.coalesce(func.sum(case((Inquiry.operator_notified.is_(False), 1), else_=0)), 0),
            *counts.values(),
        )
        row = (await self.db.execute(stmt)).one()
        total, unnotified, *per_status = row

        stats = {"total": int(total), "awaiting_notification": int(unnotified)}
        stats.update({key: int(value) for key, value in zip(counts.keys(), per_status)})
        return stats
