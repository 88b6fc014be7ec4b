"""Vendor Pydantic schemas (request DTOs and response models).

Request fields are optional on purpose: vendor writes are not validated here,
a missing field is left for the NOT NULL constraint to reject.
"""


from app.schemas.common import APIModel

class VendorCreate(APIModel):
    name: str | None = None
    contact: str | None = None

class VendorUpdate(VendorCreate):
    pass

class VendorOut(APIModel):
    id: int
    name: str | None = None
    contact: str | None = None
