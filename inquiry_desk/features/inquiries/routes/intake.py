import json

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from inquiry_desk.features.inquiries.schemas.inquiry import SubmitInquiryResponse
from inquiry_desk.features.inquiries.services.submission_service import SubmissionService
from inquiry_desk.platform.db.session import get_db
from inquiry_desk.platform.exceptions import ValidationFailed
from inquiry_desk.platform.response import public_response
from inquiry_desk.platform.schemas import ErrorResponse

router = APIRouter(tags=["Inquiries"])


@router.post(
    "/submit-order",
    response_model=SubmitInquiryResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def submit_order(request: Request, db: AsyncSession = Depends(get_db)):
    """
    Project inquiry submission
    - Validates and normalizes the form payload
    - Stores the inquiry as pending
    - Notifies the operator and confirms to the submitter
    """
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise ValidationFailed("Invalid request format")

    inquiry = await SubmissionService(db).submit(payload)

    return public_response(
        SubmitInquiryResponse(inquiryId=inquiry.id),
        status_code=status.HTTP_200_OK,
    )
