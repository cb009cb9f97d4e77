"""Response envelope shared by every endpoint."""

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """``{"success": bool, "message"?: str, "data"?: T}``."""

    success: bool = True
    message: str | None = None
    data: T | None = None


def error_body(message: str) -> dict:
    """Body of a failed response. Never carries internal error text."""
    return {"success": False, "message": message}
