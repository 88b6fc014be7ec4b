"""SQLAlchemy ORM model for Contracts."""

from __future__ import annotations

from typing import Optional

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base
from app.domain.mixins import IdentityMixin

DEFAULT_CONTRACT_STATUS = "Pending"


class Contract(Base, IdentityMixin):
    __tablename__ = "contracts"

    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    # Free text; "Pending" until a caller changes it (e.g. "Approved")
    status: Mapped[Optional[str]] = mapped_column(
        Text, default=DEFAULT_CONTRACT_STATUS, server_default=DEFAULT_CONTRACT_STATUS, nullable=True
    )
