from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from inquiry_desk.features.admin.schemas.inquiries import (
    AdminInquiryOut,
    InquiryDetailResponse,
    InquiryListResponse,
    InquiryStatsOut,
    NotesUpdateRequest,
    StatusUpdateRequest,
)
from inquiry_desk.features.admin.utils.auth import get_current_admin
from inquiry_desk.features.inquiries.services.inquiry_service import InquiryService
from inquiry_desk.features.inquiries.services.submission_service import SubmissionService
from inquiry_desk.platform.db.session import get_db
from inquiry_desk.platform.exceptions import NotificationError
from inquiry_desk.platform.logger import get_logger
from inquiry_desk.platform.response import api_response

logger = get_logger("admin_inquiries")

router = APIRouter(prefix="/admin/inquiries", tags=["Admin - Inquiries"])


@router.get("", response_model=InquiryListResponse, summary="List all inquiries, newest first")
async def list_inquiries(
    current_admin: dict = Depends(get_current_admin), db: AsyncSession = Depends(get_db)
):
    inquiries = await InquiryService(db).list_inquiries()

    return api_response(
        data=[AdminInquiryOut.model_validate(i) for i in inquiries],
        message="Inquiries retrieved successfully",
    )


@router.get("/stats", summary="Inquiry counts per status")
async def get_inquiry_stats(
    current_admin: dict = Depends(get_current_admin), db: AsyncSession = Depends(get_db)
):
    """
    Totals for the dashboard header:
    - all inquiries and the count per status
    - inquiries whose operator notification never went out
    """
    stats = await InquiryService(db).get_stats()

    return api_response(
        data=InquiryStatsOut.model_validate(stats),
        message="Inquiry statistics retrieved successfully",
    )


@router.get("/{inquiry_id}", response_model=InquiryDetailResponse, summary="Get one inquiry")
async def get_inquiry(
    inquiry_id: str,
    current_admin: dict = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db),
):
    inquiry = await InquiryService(db).get_inquiry(inquiry_id)

    return api_response(
        data=AdminInquiryOut.model_validate(inquiry),
        message="Inquiry retrieved successfully",
    )


@router.patch("/{inquiry_id}/status", response_model=InquiryDetailResponse, summary="Set status")
async def update_inquiry_status(
    inquiry_id: str,
    payload: StatusUpdateRequest,
    current_admin: dict = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db),
):
    inquiry = await InquiryService(db).update_status(inquiry_id, payload.status)
    logger.info(f"{current_admin['email']} set inquiry {inquiry_id} to {payload.status.value}")

    return api_response(
        data=AdminInquiryOut.model_validate(inquiry),
        message=f"Order marked as {payload.status.value}",
    )


@router.patch("/{inquiry_id}/notes", response_model=InquiryDetailResponse, summary="Save notes")
async def update_inquiry_notes(
    inquiry_id: str,
    payload: NotesUpdateRequest,
    current_admin: dict = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db),
):
    inquiry = await InquiryService(db).update_notes(inquiry_id, payload.admin_notes)

    return api_response(
        data=AdminInquiryOut.model_validate(inquiry),
        message="Notes saved",
    )


@router.delete("/{inquiry_id}", summary="Permanently delete an inquiry")
async def delete_inquiry(
    inquiry_id: str,
    confirm: bool = Query(False, description="Must be true; deletion cannot be undone"),
    current_admin: dict = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db),
):
    if not confirm:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Deletion must be confirmed with confirm=true",
        )

    await InquiryService(db).delete_inquiry(inquiry_id)
    logger.info(f"{current_admin['email']} deleted inquiry {inquiry_id}")

    return api_response(data={"id": inquiry_id}, message="Order deleted")


@router.post("/{inquiry_id}/notify", response_model=InquiryDetailResponse, summary="Re-send operator email")
async def resend_operator_notification(
    inquiry_id: str,
    current_admin: dict = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db),
):
    inquiry = await InquiryService(db).get_inquiry(inquiry_id)

    try:
        inquiry = await SubmissionService(db).notify_operator(inquiry)
    except NotificationError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message) from e

    return api_response(
        data=AdminInquiryOut.model_validate(inquiry),
        message="Operator notification sent",
    )
