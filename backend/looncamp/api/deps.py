"""Shared API dependencies — single import point for all routers.

Re-exports database session and authentication dependencies so that router
modules can import everything they need from one place::

    from looncamp.api.deps import get_current_admin, get_property_repository
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from looncamp.auth.dependencies import get_current_admin
from looncamp.database import get_db
from looncamp.services.property_repository import PropertyRepository


async def get_property_repository(db: AsyncSession = Depends(get_db)) -> PropertyRepository:
    """Bind a repository to the request's session."""
    return PropertyRepository(db)


__all__ = [
    "get_db",
    "get_current_admin",
    "get_property_repository",
]
