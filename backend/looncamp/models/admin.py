"""Admin model holding console credentials."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from looncamp.database import Base, TimestampMixin, UUIDPrimaryKeyMixin


class Admin(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """An administrator allowed to sign in to the console."""

    __tablename__ = "admins"

    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<Admin id={self.id} email={self.email!r}>"
