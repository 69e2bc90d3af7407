from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    """Envelope used by the admin, assistant and health endpoints."""

    status_code: int = 200
    status: str = "success"
    message: str
    data: T


class ErrorResponse(BaseModel):
    """Body of every public endpoint failure."""

    error: str


class HealthData(BaseModel):
    status: str
    service: str
    database: str
