"""Vendor CRUD router: REFERENCE pattern for all resource routers.

Pattern:
  1. Declare a router with prefix and tags
  2. Inject the DB session via Depends
  3. Instantiate the service with the session
  4. Call service methods and shape the result with the response model

Copy this file when adding a new resource router.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.base import get_db
from app.schemas.vendor import VendorCreate, VendorOut, VendorUpdate
from app.services.vendor import VendorService

router = APIRouter(prefix="/vendors", tags=["Vendors"])


# ------------------------------------------------------------------
# Endpoints
# ------------------------------------------------------------------

@router.get("", response_model=list[VendorOut])
async def list_vendors(session: AsyncSession = Depends(get_db)):
    """List every vendor."""
    return await VendorService(session).list()


@router.post("", response_model=VendorOut, status_code=status.HTTP_201_CREATED)
async def create_vendor(
    body: VendorCreate | None = None,
    session: AsyncSession = Depends(get_db),
):
    """Create a new vendor. Fields are not validated (see VendorService)."""
    return await VendorService(session).create(body or VendorCreate())


@router.put("/{vendor_id}", response_model=VendorOut)
async def update_vendor(
    vendor_id: int,
    body: VendorUpdate | None = None,
    session: AsyncSession = Depends(get_db),
):
    return await VendorService(session).update(vendor_id, body or VendorUpdate())


@router.delete("/{vendor_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_vendor(
    vendor_id: int,
    session: AsyncSession = Depends(get_db),
):
    await VendorService(session).delete(vendor_id)
