import json

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from inquiry_desk.features.inquiries.schemas.inquiry import TrackedInquiryOut, TrackResponse
from inquiry_desk.features.inquiries.services.inquiry_service import InquiryService
from inquiry_desk.features.inquiries.services.validation_service import ValidationService
from inquiry_desk.platform.db.session import get_db
from inquiry_desk.platform.exceptions import ValidationFailed
from inquiry_desk.platform.response import public_response
from inquiry_desk.platform.schemas import ErrorResponse
from inquiry_desk.platform.utils.rate_limit import client_key, get_track_rate_limiter

router = APIRouter(tags=["Inquiries"])


@router.post(
    "/track-order",
    response_model=TrackResponse,
    responses={
        400: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def track_order(request: Request, db: AsyncSession = Depends(get_db)):
    """
    Look up inquiry status by email without an account.
    Only public-facing fields are returned, newest first.
    """
    await get_track_rate_limiter().hit(client_key(request))

    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise ValidationFailed("Invalid request")

    email = ValidationService.validate_tracking_email(body)
    inquiries = await InquiryService(db).find_by_email(email)

    return public_response(
        TrackResponse(orders=[TrackedInquiryOut.model_validate(i) for i in inquiries])
    )
