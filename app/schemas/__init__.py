"""Pydantic schemas package.

Folder intent:
  common.py    - APIModel base + HealthResponse (all schemas inherit APIModel)
  vendor.py    - REFERENCE pattern (copy when adding a new resource)
  supplier.py  - Supplier DTOs
  contract.py  - Contract DTOs (create, status update, outputs)
  auth.py      - Signup/login credentials and acknowledgement
"""
