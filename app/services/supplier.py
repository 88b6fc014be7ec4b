"""Supplier service: the one resource whose fields are checked before writing."""


from app.core.exceptions import ValidationError
from app.domain.supplier import Supplier
from app.repositories.supplier import SupplierRepository
from app.schemas.supplier import SupplierCreate
from app.services.base import ResourceService

REQUIRED_FIELDS = ("name", "contact", "email")

class SupplierService(ResourceService[Supplier]):
    repository_class = SupplierRepository
    entity = "Supplier"

    def _validate(self, data: SupplierCreate) -> None:
        # None and "" are both missing
        if not all(getattr(data, field) for field in REQUIRED_FIELDS):
            raise ValidationError("Name, contact, and email are required")
