"""SQLAlchemy ORM model for login credentials."""

from __future__ import annotations

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base
from app.domain.mixins import IdentityMixin


class User(Base, IdentityMixin):
    __tablename__ = "users"

    username: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    # Stored exactly as supplied (no hashing)
    password: Mapped[str] = mapped_column(Text, nullable=False)
