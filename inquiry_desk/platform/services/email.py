import smtplib
import ssl
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import List

import requests

from inquiry_desk.platform.config import settings
from inquiry_desk.platform.exceptions import EmailDeliveryError
from inquiry_desk.platform.logger import get_logger

logger = get_logger("email_service")


def sender_address() -> str:
    return f"{settings.MAIL_FROM_NAME} <{settings.MAIL_FROM_ADDRESS}>"


def send_email(to: List[str], subject: str, html: str):
    """
    Send an HTML email through the transactional email API.
    Falls back to direct SMTP if the API key is not configured.

    Raises EmailDeliveryError when the message could not be handed off.
    """
    if settings.EMAIL_API_URL and settings.EMAIL_API_KEY:
        return send_email_via_api(to, subject, html)

    logger.warning("Email API not configured, attempting direct SMTP")
    return send_email_direct_smtp(to, subject, html)


def send_email_via_api(to: List[str], subject: str, html: str):
    """Send email via the HTTP email API ({from, to[], subject, html})."""
    payload = {
        "from": sender_address(),
        "to": to,
        "subject": subject,
        "html": html,
    }

    headers = {
        "Authorization": f"Bearer {settings.EMAIL_API_KEY}",
        "Content-Type": "application/json",
    }

    try:
        response = requests.post(
            settings.EMAIL_API_URL,
            json=payload,
            headers=headers,
            timeout=settings.EMAIL_API_TIMEOUT,
        )
        response.raise_for_status()

        try:
            result = response.json()
        except ValueError:
            # Accepted (2xx) but no JSON body; the message is still on its way
            logger.warning(f"Email API returned a non-JSON body ({response.status_code})")
            result = {}
        if not isinstance(result, dict):
            result = {}

    except requests.exceptions.Timeout as e:
        logger.error(f"Email API timeout for {', '.join(to)}")
        raise EmailDeliveryError("Email dispatch failed: timeout") from e

    except requests.exceptions.RequestException as e:
        logger.error(f"Email API request failed: {str(e)}")
        detail = str(e)
        if getattr(e, "response", None) is not None:
            logger.error(f"Response status: {e.response.status_code}")
            logger.error(f"Response body: {e.response.text}")
            detail = e.response.text
        raise EmailDeliveryError(f"Email dispatch failed: {detail}") from e

    logger.info(f"Email sent via API to {', '.join(to)}: {result.get('id')}")
    return result


def send_email_direct_smtp(to: List[str], subject: str, html: str):
    """Send email via SMTP"""
    msg = MIMEMultipart("alternative")
    msg["Subject"] = subject
    msg["From"] = sender_address()
    msg["To"] = ", ".join(to)

    msg.attach(MIMEText(html, "html"))

    try:
        port = settings.MAIL_PORT

        if port == 465:
            context = ssl.create_default_context()
            with smtplib.SMTP_SSL(settings.MAIL_HOST, port, context=context) as server:
                server.login(settings.MAIL_USERNAME, settings.MAIL_PASSWORD)
                server.sendmail(settings.MAIL_FROM_ADDRESS, to, msg.as_string())
        else:
            with smtplib.SMTP(settings.MAIL_HOST, port) as server:
                server.ehlo()

                if str(settings.MAIL_ENCRYPTION).upper() in ["TLS", "TRUE"]:
                    server.starttls()
                    server.ehlo()

                server.login(settings.MAIL_USERNAME, settings.MAIL_PASSWORD)
                server.sendmail(settings.MAIL_FROM_ADDRESS, to, msg.as_string())

    except (smtplib.SMTPException, OSError) as e:
        logger.error(f"CRITICAL EMAIL ERROR: {str(e)}")
        raise EmailDeliveryError(f"Email dispatch failed: {str(e)}") from e

    logger.info(f"Email sent via SMTP to {', '.join(to)}")
    return {"id": None}
