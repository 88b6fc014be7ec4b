"""Contract service.

Contracts are created as "Pending" and afterwards only their status moves;
title and description are fixed at creation.
"""


from typing import Any

from app.domain.contract import DEFAULT_CONTRACT_STATUS, Contract
from app.repositories.contract import ContractRepository
from app.schemas.contract import ContractCreate, ContractStatusUpdate
from app.services.base import ResourceService

class ContractService(ResourceService[Contract]):
    repository_class = ContractRepository
    entity = "Contract"

    def _create_fields(self, data: ContractCreate) -> dict[str, Any]:
        return {
            "title": data.title,
            "description": data.description,
            "status": DEFAULT_CONTRACT_STATUS,
        }

    def _update_fields(self, data: ContractStatusUpdate) -> dict[str, Any]:
        return {"status": data.status}
