"""Supplier CRUD router."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.base import get_db
from app.schemas.supplier import SupplierCreate, SupplierOut, SupplierUpdate
from app.services.supplier import SupplierService

router = APIRouter(prefix="/suppliers", tags=["Suppliers"])


@router.get("", response_model=list[SupplierOut])
async def list_suppliers(session: AsyncSession = Depends(get_db)):
    return await SupplierService(session).list()


@router.post("", response_model=SupplierOut, status_code=status.HTTP_201_CREATED)
async def create_supplier(
    body: SupplierCreate | None = None,
    session: AsyncSession = Depends(get_db),
):
    """Create a supplier. 400 unless name, contact and email are all non-empty."""
    return await SupplierService(session).create(body or SupplierCreate())


@router.put("/{supplier_id}", response_model=SupplierOut)
async def update_supplier(
    supplier_id: int,
    body: SupplierUpdate | None = None,
    session: AsyncSession = Depends(get_db),
):
    return await SupplierService(session).update(supplier_id, body or SupplierUpdate())


@router.delete("/{supplier_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_supplier(
    supplier_id: int,
    session: AsyncSession = Depends(get_db),
):
    await SupplierService(session).delete(supplier_id)
