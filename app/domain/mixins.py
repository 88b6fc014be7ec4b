"""Reusable SQLAlchemy column mixins."""

from __future__ import annotations

from sqlalchemy import Integer
from sqlalchemy.orm import Mapped, mapped_column


class IdentityMixin:
    """Adds an auto-incrementing integer primary key.

    ``sqlite_autoincrement`` keeps ids monotonic on SQLite: a deleted id is
    never handed out again.
    """

    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
