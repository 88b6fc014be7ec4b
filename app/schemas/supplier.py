"""Supplier Pydantic schemas.

Presence of name/contact/email is checked by SupplierService (400), not by
pydantic (422), so every field is optional at this layer.
"""


from app.schemas.common import APIModel

class SupplierCreate(APIModel):
    name: str | None = None
    contact: str | None = None
    email: str | None = None

class SupplierUpdate(SupplierCreate):
    pass

class SupplierOut(APIModel):
    id: int
    name: str
    contact: str
    email: str
