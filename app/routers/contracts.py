"""Contract router. PUT only changes the status."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.base import get_db
from app.schemas.contract import (
    ContractCreate,
    ContractOut,
    ContractStatusOut,
    ContractStatusUpdate,
)
from app.services.contract import ContractService

router = APIRouter(prefix="/contracts", tags=["Contracts"])


@router.get("", response_model=list[ContractOut])
async def list_contracts(session: AsyncSession = Depends(get_db)):
    return await ContractService(session).list()


@router.post("", response_model=ContractOut, status_code=status.HTTP_201_CREATED)
async def create_contract(
    body: ContractCreate | None = None,
    session: AsyncSession = Depends(get_db),
):
    """Create a contract with status "Pending"."""
    return await ContractService(session).create(body or ContractCreate())


@router.put("/{contract_id}", response_model=ContractStatusOut)
async def update_contract_status(
    contract_id: int,
    body: ContractStatusUpdate | None = None,
    session: AsyncSession = Depends(get_db),
):
    return await ContractService(session).update(contract_id, body or ContractStatusUpdate())


@router.delete("/{contract_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_contract(
    contract_id: int,
    session: AsyncSession = Depends(get_db),
):
    await ContractService(session).delete(contract_id)
