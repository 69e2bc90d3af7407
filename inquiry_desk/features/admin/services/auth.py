from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import HTTPException, status
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from inquiry_desk.features.admin.models.admin import Admin
from inquiry_desk.features.admin.schemas.auth import AdminLoginRequest, AdminResponse
from inquiry_desk.features.admin.utils.security import (
    create_access_token,
    hash_password,
    verify_password,
)
from inquiry_desk.platform.config import settings


class AdminAuthService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_admin_by_email(self, email: str) -> Optional[Admin]:
        result = await self.db.execute(select(Admin).where(Admin.email == email.lower()))
        return result.scalar_one_or_none()

    async def get_admin_by_id(self, admin_id: str) -> Optional[Admin]:
        return await self.db.get(Admin, admin_id)

    async def authenticate_admin(self, email: str, password: str) -> Optional[Admin]:
        admin = await self.get_admin_by_email(email)
        if not admin:
            return None
        if not verify_password(password, admin.password_hash):
            return None
        if not bool(admin.is_active):
            return None
        return admin

    async def create_admin(self, email: str, password: str) -> Admin:
        if await self.get_admin_by_email(email):
            raise ValueError(f"Admin with email {email} already exists")

        admin = Admin(email=email.lower(), password_hash=hash_password(password), is_active=True)
        self.db.add(admin)
        await self.db.commit()
        await self.db.refresh(admin)
        return admin

    async def count_admins(self) -> int:
        return await self.db.scalar(select(func.count(Admin.id))) or 0

    async def login_admin(self, login_data: AdminLoginRequest) -> tuple[Admin, str]:
        admin = await self.authenticate_admin(login_data.email, login_data.password)
        if not admin:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Incorrect email or password",
                headers={"WWW-Authenticate": "Bearer"},
            )

        access_token = create_access_token(
            data={"sub": str(admin.id), "email": admin.email, "is_admin": True},
            expires_delta=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
        )

        admin.last_login = datetime.now(timezone.utc)
        await self.db.commit()

        return admin, access_token

    @staticmethod
    def admin_to_response(admin: Admin) -> AdminResponse:
        return AdminResponse(
            id=str(admin.id),
            email=admin.email,
            is_active=admin.is_active,
            last_login=admin.last_login.isoformat() if admin.last_login else None,
            created_at=admin.created_at.isoformat(),
        )
