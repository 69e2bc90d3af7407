from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from inquiry_desk.features.admin.schemas.auth import AdminAuthResponse, AdminLoginRequest
from inquiry_desk.features.admin.services.auth import AdminAuthService
from inquiry_desk.features.admin.utils.auth import get_current_admin
from inquiry_desk.platform.config import settings
from inquiry_desk.platform.db.session import get_db
from inquiry_desk.platform.response import api_response

router = APIRouter(prefix="/admin/auth", tags=["Admin - Authentication"])


@router.post(
    "/login",
    response_model=AdminAuthResponse,
    status_code=status.HTTP_200_OK,
    summary="Login as admin",
)
async def login_admin(login_data: AdminLoginRequest, db: AsyncSession = Depends(get_db)):
    """
    Authenticate the site owner and return a bearer session token.
    """
    auth_service = AdminAuthService(db)

    admin, access_token = await auth_service.login_admin(login_data)

    return api_response(
        data={
            "admin": auth_service.admin_to_response(admin),
            "access_token": access_token,
            "token_type": "bearer",
            "expires_in": settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        },
        message="Admin login successful",
        status_code=status.HTTP_200_OK,
    )


@router.get("/me", status_code=status.HTTP_200_OK, summary="Get current admin profile")
async def get_current_admin_profile(
    current_admin: dict = Depends(get_current_admin), db: AsyncSession = Depends(get_db)
):
    auth_service = AdminAuthService(db)
    admin = await auth_service.get_admin_by_id(current_admin["id"])

    if not admin:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Admin not found")

    return api_response(
        data=auth_service.admin_to_response(admin),
        message="Admin profile retrieved successfully",
    )


@router.post("/logout", status_code=status.HTTP_200_OK, summary="Logout admin")
async def logout_admin(current_admin: dict = Depends(get_current_admin)):
    """
    Stateless JWT: this is a client-side signal. The client should discard the token.
    """
    return api_response(data={}, message="Admin logout successful")
