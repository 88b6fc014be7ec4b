# tests/test_services.py
"""Service-layer behaviour, driven directly against a real SQLite session."""

import pytest
from sqlalchemy.exc import IntegrityError

from app.core.exceptions import ConflictError, NotFoundError, UnauthorizedError, ValidationError
from app.domain.contract import DEFAULT_CONTRACT_STATUS
from app.repositories.user import UserRepository
from app.schemas.auth import Credentials
from app.schemas.contract import ContractCreate, ContractStatusUpdate
from app.schemas.supplier import SupplierCreate, SupplierUpdate
from app.schemas.vendor import VendorCreate, VendorUpdate
from app.services.auth import CredentialService
from app.services.contract import ContractService
from app.services.supplier import SupplierService
from app.services.vendor import VendorService

pytestmark = pytest.mark.anyio


# ---------------------------------------------------------------------------
# Vendors
# ---------------------------------------------------------------------------

async def test_vendor_create_then_list_includes_generated_id(session):
    svc = VendorService(session)
    vendor = await svc.create(VendorCreate(name="Acme", contact="555-0100"))

    assert isinstance(vendor.id, int)
    rows = await svc.list()
    assert [(v.id, v.name, v.contact) for v in rows] == [(vendor.id, "Acme", "555-0100")]


async def test_vendor_ids_are_not_reused_after_delete(session):
    svc = VendorService(session)
    first = await svc.create(VendorCreate(name="A", contact="1"))
    await svc.delete(first.id)
    second = await svc.create(VendorCreate(name="B", contact="2"))

    assert second.id > first.id


async def test_vendor_create_without_contact_fails_in_storage(session):
    # vendors are pass-through: the NOT NULL constraint is the only guard
    with pytest.raises(IntegrityError):
        await VendorService(session).create(VendorCreate(name="Acme"))


async def test_vendor_update_echoes_input(session):
    svc = VendorService(session)
    vendor = await svc.create(VendorCreate(name="Acme", contact="555-0100"))

    updated = await svc.update(vendor.id, VendorUpdate(name="Acme Ltd", contact="555-0199"))

    assert updated == {"id": vendor.id, "name": "Acme Ltd", "contact": "555-0199"}
    [row] = await svc.list()
    assert (row.name, row.contact) == ("Acme Ltd", "555-0199")


async def test_vendor_update_unknown_id_is_not_found(session):
    svc = VendorService(session)
    await svc.create(VendorCreate(name="Acme", contact="555-0100"))

    with pytest.raises(NotFoundError):
        await svc.update(999, VendorUpdate(name="X", contact="Y"))

    [row] = await svc.list()
    assert row.name == "Acme"


async def test_vendor_delete_twice(session):
    svc = VendorService(session)
    vendor = await svc.create(VendorCreate(name="Acme", contact="555-0100"))

    await svc.delete(vendor.id)
    assert await svc.list() == []

    with pytest.raises(NotFoundError):
        await svc.delete(vendor.id)


# ---------------------------------------------------------------------------
# Suppliers
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "fields",
    [
        {"contact": "555", "email": "a@b.c"},
        {"name": "", "contact": "555", "email": "a@b.c"},
        {"name": "Bolt Co", "contact": "", "email": "a@b.c"},
        {"name": "Bolt Co", "contact": "555"},
        {},
    ],
)
async def test_supplier_create_rejects_missing_fields(session, fields):
    svc = SupplierService(session)

    with pytest.raises(ValidationError) as exc_info:
        await svc.create(SupplierCreate(**fields))

    assert exc_info.value.status_code == 400
    assert await svc.list() == []


async def test_supplier_update_validates_before_lookup(session):
    # an unknown id with bad input is a validation error, not a 404
    with pytest.raises(ValidationError):
        await SupplierService(session).update(42, SupplierUpdate(name="X", contact="Y", email=""))


async def test_supplier_update_round_trip(session):
    svc = SupplierService(session)
    supplier = await svc.create(SupplierCreate(name="Bolt Co", contact="555", email="a@bolt.co"))

    updated = await svc.update(
        supplier.id, SupplierUpdate(name="Bolt Inc", contact="556", email="b@bolt.co")
    )

    assert updated == {"id": supplier.id, "name": "Bolt Inc", "contact": "556", "email": "b@bolt.co"}


async def test_supplier_update_unknown_id_is_not_found(session):
    with pytest.raises(NotFoundError):
        await SupplierService(session).update(
            7, SupplierUpdate(name="Bolt Inc", contact="556", email="b@bolt.co")
        )


# ---------------------------------------------------------------------------
# Contracts
# ---------------------------------------------------------------------------

async def test_contract_defaults_to_pending(session):
    contract = await ContractService(session).create(
        ContractCreate(title="Cleaning", description="Office cleaning, 12 months")
    )
    assert contract.status == DEFAULT_CONTRACT_STATUS == "Pending"


async def test_contract_status_update_leaves_title_and_description(session):
    svc = ContractService(session)
    contract = await svc.create(ContractCreate(title="Cleaning", description="12 months"))

    updated = await svc.update(contract.id, ContractStatusUpdate(status="Approved"))
    assert updated == {"id": contract.id, "status": "Approved"}

    [row] = await svc.list()
    assert (row.title, row.description, row.status) == ("Cleaning", "12 months", "Approved")


async def test_contract_delete_unknown_id(session):
    with pytest.raises(NotFoundError):
        await ContractService(session).delete(1)


# ---------------------------------------------------------------------------
# Credentials
# ---------------------------------------------------------------------------

async def test_register_duplicate_username_conflicts(session):
    svc = CredentialService(session)
    await svc.register(Credentials(username="alice", password="pw1"))

    with pytest.raises(ConflictError):
        await svc.register(Credentials(username="alice", password="pw2"))

    users = await UserRepository(session).list()
    assert [(u.username, u.password) for u in users] == [("alice", "pw1")]


async def test_register_requires_both_fields(session):
    with pytest.raises(ValidationError):
        await CredentialService(session).register(Credentials(username="alice"))
    assert await UserRepository(session).list() == []


async def test_verify_matches_exact_credentials(session):
    svc = CredentialService(session)
    await svc.register(Credentials(username="alice", password="s3cret"))

    await svc.verify(Credentials(username="alice", password="s3cret"))


@pytest.mark.parametrize(
    "username, password",
    [("alice", "wrong"), ("bob", "s3cret"), ("Alice", "s3cret"), (None, None)],
)
async def test_verify_failures_are_indistinguishable(session, username, password):
    svc = CredentialService(session)
    await svc.register(Credentials(username="alice", password="s3cret"))

    with pytest.raises(UnauthorizedError) as exc_info:
        await svc.verify(Credentials(username=username, password=password))

    assert exc_info.value.message == "Invalid username or password"


async def test_not_found_message_has_no_id(session):
    with pytest.raises(NotFoundError) as exc_info:
        await SupplierService(session).delete(3)
    assert exc_info.value.message == "Supplier not found"


async def test_out_of_range_id_reports_no_rows(session):
    svc = VendorService(session)
    await svc.create(VendorCreate(name="Acme", contact="1"))

    with pytest.raises(NotFoundError):
        await svc.update(2**64, VendorUpdate(name="X", contact="Y"))
    with pytest.raises(NotFoundError):
        await svc.delete(2**64)
    assert len(await svc.list()) == 1
