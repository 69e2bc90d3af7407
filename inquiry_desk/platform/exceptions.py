from typing import Optional

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from inquiry_desk.platform.logger import get_logger
from inquiry_desk.platform.response import api_response, error_response

logger = get_logger("exceptions")


class InquiryDeskError(Exception):
    """Base error rendered to callers as ``{"error": message}``."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationFailed(InquiryDeskError):
    status_code = status.HTTP_400_BAD_REQUEST


class RateLimited(InquiryDeskError):
    status_code = status.HTTP_429_TOO_MANY_REQUESTS

    def __init__(self, message: str, retry_after: int):
        super().__init__(message)
        self.retry_after = retry_after


class StoreError(InquiryDeskError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class NotificationError(InquiryDeskError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class EmailDeliveryError(Exception):
    """Raised by the email layer when a message could not be handed off."""


def add_exception_handlers(app):
    @app.exception_handler(InquiryDeskError)
    async def inquiry_desk_error_handler(request: Request, exc: InquiryDeskError):
        headers = None
        if isinstance(exc, RateLimited):
            headers = {"Retry-After": str(exc.retry_after)}
        return error_response(exc.message, status_code=exc.status_code, headers=headers)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        response = api_response(message=str(exc.detail) or "Error", status_code=exc.status_code)
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return api_response(
            message="Validation failed",
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            data={"errors": exc.errors()},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled exception: {exc}")
        return api_response(
            message="Internal server error",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
