from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape
from starlette.concurrency import run_in_threadpool

from inquiry_desk.features.inquiries.models.inquiry import Inquiry
from inquiry_desk.features.inquiries.utils.lifecycle import goal_display
from inquiry_desk.platform.config import settings
from inquiry_desk.platform.logger import get_logger
from inquiry_desk.platform.services.email import send_email

logger = get_logger("inquiry_notifications")


class InquiryNotifier:
    """Renders and sends the two emails that follow a new inquiry"""

    @staticmethod
    def _env() -> Environment:
        templates = Path(__file__).resolve().parent.parent / "template"
        return Environment(
            loader=FileSystemLoader(str(templates)),
            autoescape=select_autoescape(["html"]),
        )

    @classmethod
    async def send_operator_notification(cls, inquiry: Inquiry) -> None:
        """Raises EmailDeliveryError; the caller decides whether that is fatal."""
        template = cls._env().get_template("operator_notification.html")
        html = template.render(
            inquiry=inquiry,
            goal=goal_display(inquiry.website_goal, inquiry.website_goal_other),
        )
        await run_in_threadpool(
            send_email,
            [settings.MAIL_ADMIN_EMAIL],
            f"New Project: {inquiry.business_name}",
            html,
        )
        logger.info(f"Operator notified about inquiry {inquiry.id}")

    @classmethod
    async def send_confirmation(cls, inquiry: Inquiry) -> None:
        template = cls._env().get_template("inquiry_confirmation.html")
        html = template.render(inquiry=inquiry, sender_name=settings.MAIL_FROM_NAME)
        await run_in_threadpool(
            send_email,
            [inquiry.email],
            f"Project Inquiry Received | {settings.MAIL_FROM_NAME}",
            html,
        )
        logger.info(f"Confirmation sent for inquiry {inquiry.id}")
