from sqlalchemy import Boolean, Column, DateTime, String
from uuid_extension import uuid7

from inquiry_desk.platform.db.base import BaseModel


class Admin(BaseModel):
    __tablename__ = "admins"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid7()), index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)

    is_active = Column(Boolean, default=True, nullable=False)
    last_login = Column(DateTime(timezone=True), nullable=True)

    def __repr__(self):
        return f"<Admin(id={self.id}, email={self.email}, is_active={self.is_active})>"
