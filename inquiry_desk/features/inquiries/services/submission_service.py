from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from uuid_extension import uuid7

from inquiry_desk.features.inquiries.models.inquiry import Inquiry
from inquiry_desk.features.inquiries.services.inquiry_service import InquiryService
from inquiry_desk.features.inquiries.services.notification_service import InquiryNotifier
from inquiry_desk.features.inquiries.services.validation_service import ValidationService
from inquiry_desk.platform.exceptions import EmailDeliveryError, NotificationError
from inquiry_desk.platform.logger import get_logger

logger = get_logger("submission_service")


class SubmissionService:
    """
    Intake flow for a new inquiry.

    Order of side effects:
    1. validate and normalize (nothing written on failure)
    2. generate the identifier and store the record as pending
    3. notify the operator; failure surfaces to the caller and leaves
       operator_notified = False so the admin console can re-send it
    4. confirm to the submitter; failure is logged and swallowed
    """

    def __init__(self, db: AsyncSession):
        self.db = db
        self.inquiries = InquiryService(db)

    async def submit(self, raw: Any) -> Inquiry:
        data = ValidationService.validate_inquiry(raw)

        inquiry_id = str(uuid7())
        inquiry = await self.inquiries.create_inquiry(data, inquiry_id)

        await self.notify_operator(inquiry)

        try:
            await InquiryNotifier.send_confirmation(inquiry)
        except EmailDeliveryError as e:
            logger.warning(f"Client email skipped for inquiry {inquiry.id}: {e}")

        return inquiry

    async def notify_operator(self, inquiry: Inquiry) -> Inquiry:
        try:
            await InquiryNotifier.send_operator_notification(inquiry)
        except EmailDeliveryError as e:
            logger.error(f"Operator notification failed for inquiry {inquiry.id}: {e}")
            raise NotificationError(str(e)) from e

        try:
            await self.inquiries.mark_notified(inquiry)
        except SQLAlchemyError as e:
            # The email went out; only the marker is stale.
            await self.db.rollback()
            logger.error(f"Could not mark inquiry {inquiry.id} as notified: {e}")

        return inquiry
