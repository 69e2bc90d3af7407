from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from inquiry_desk.features.admin.services.auth import AdminAuthService
from inquiry_desk.features.admin.utils.security import decode_access_token
from inquiry_desk.platform.db.session import get_db

security = HTTPBearer(auto_error=False)


async def get_current_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: AsyncSession = Depends(get_db),
) -> dict:
    """
    Resolve the admin session from the bearer token.

    Any 401 means the session is missing or gone and the console should
    return to its login screen.
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        payload = decode_access_token(credentials.credentials)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        ) from e

    admin_id: str | None = payload.get("sub")
    email: str | None = payload.get("email")
    is_admin: bool = payload.get("is_admin", False)

    if admin_id is None or email is None or not is_admin:
        raise credentials_exception

    admin = await AdminAuthService(db).get_admin_by_id(admin_id)
    if admin is None:
        raise credentials_exception

    if not bool(admin.is_active):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin account is inactive")

    return {"id": str(admin.id), "email": admin.email}
