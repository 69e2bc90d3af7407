from typing import Optional

from pydantic import BaseModel, EmailStr


class AdminLoginRequest(BaseModel):
    email: EmailStr
    password: str


class AdminResponse(BaseModel):
    id: str
    email: str
    is_active: bool
    last_login: Optional[str] = None
    created_at: str


class AdminAuthResponse(BaseModel):
    admin: AdminResponse
    access_token: str
    token_type: str = "bearer"
    expires_in: int
