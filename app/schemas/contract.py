"""Contract Pydantic schemas."""


from app.schemas.common import APIModel

class ContractCreate(APIModel):
    # status is not accepted on create; every contract starts as "Pending"
    title: str | None = None
    description: str | None = None

class ContractStatusUpdate(APIModel):
    status: str | None = None

class ContractOut(APIModel):
    id: int
    title: str | None = None
    description: str | None = None
    status: str | None = None

class ContractStatusOut(APIModel):
    id: int
    status: str | None = None
