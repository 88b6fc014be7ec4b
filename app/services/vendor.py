"""Vendor service: REFERENCE pattern for all resource services.

How to add a new service:
  1. Create app/services/my_entity.py
  2. Subclass ResourceService and point it at the repository
  3. Override the hooks only where the resource has its own rules
  4. Raise AppException subclasses for business rule violations

Rule: No SQLAlchemy / no FastAPI here. Pure Python business logic.

Vendor writes are pass-through: unlike suppliers, a vendor without a name or
contact is not rejected here and fails at the NOT NULL constraint instead.
"""


from app.domain.vendor import Vendor
from app.repositories.vendor import VendorRepository
from app.services.base import ResourceService

class VendorService(ResourceService[Vendor]):
    repository_class = VendorRepository
    entity = "Vendor"
