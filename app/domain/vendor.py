"""SQLAlchemy ORM model for Vendors.

This is the REFERENCE module showing the pattern for all domain models:
  - Inherit Base, IdentityMixin
  - Integer auto-increment primary key (from IdentityMixin)
  - Flat columns only; no relationships to other resources
Copy this pattern when adding new domain models.
"""

from __future__ import annotations

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base
from app.domain.mixins import IdentityMixin


class Vendor(Base, IdentityMixin):
    __tablename__ = "vendors"

    name: Mapped[str] = mapped_column(Text, nullable=False)
    contact: Mapped[str] = mapped_column(Text, nullable=False)
