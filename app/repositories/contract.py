from app.domain.contract import Contract
from app.repositories.base import BaseRepository


class ContractRepository(BaseRepository[Contract]):
    model = Contract
