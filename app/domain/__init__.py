"""Domain package: all ORM models are imported here so create_all sees every table.

Folder intent:
  vendor.py    - REFERENCE pattern (copy when adding a new resource)
  supplier.py  - Suppliers (name, contact, email)
  contract.py  - Contracts with a free-text status
  user.py      - Login credentials
  mixins.py    - Shared IdentityMixin
"""

from app.domain.contract import Contract
from app.domain.supplier import Supplier
from app.domain.user import User
from app.domain.vendor import Vendor

__all__ = [
    "Contract",
    "Supplier",
    "User",
    "Vendor",
]
