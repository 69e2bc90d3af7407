from enum import Enum

from sqlalchemy import Boolean, Column, Index
from sqlalchemy import Enum as SQLEnum
from sqlalchemy import String, Text
from uuid_extension import uuid7

from inquiry_desk.platform.db.base import BaseModel


class InquiryStatus(str, Enum):
    """Inquiry lifecycle states"""

    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    PREVIEW_SENT = "preview-sent"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Inquiry(BaseModel):
    __tablename__ = "orders"
    __table_args__ = (Index("ix_orders_created_at", "created_at"),)

    id = Column(String(36), primary_key=True, default=lambda: str(uuid7()), index=True)

    # Contact
    full_name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, index=True)
    whatsapp = Column(String(50), nullable=False)

    # Project
    business_name = Column(String(255), nullable=False)
    niche = Column(String(255), nullable=False)
    website_goal = Column(String(100), nullable=False)
    website_goal_other = Column(Text, nullable=True)
    key_features = Column(Text, nullable=True)
    special_requests = Column(Text, nullable=True)
    reference_style = Column(Text, nullable=True)

    # Lifecycle
    status = Column(
        SQLEnum(
            InquiryStatus,
            name="inquiry_status",
            native_enum=False,
            create_constraint=True,
            length=32,
            validate_strings=True,
            values_callable=lambda statuses: [s.value for s in statuses],
        ),
        nullable=False,
        default=InquiryStatus.PENDING,
        index=True,
    )
    admin_notes = Column(Text, nullable=True)
    operator_notified = Column(Boolean, nullable=False, default=False)

    def __repr__(self) -> str:
        return f"<Inquiry(id='{self.id}', business_name='{self.business_name}', status='{self.status}')>"
