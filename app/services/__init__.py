"""Services package: all business logic lives here, never in routers.

Files:
  base.py      - generic ResourceService (list / create / update / delete)
  vendor.py    - REFERENCE service pattern (pass-through writes)
  supplier.py  - validated writes (name, contact, email required)
  contract.py  - "Pending" default, status-only updates
  auth.py      - CredentialService (signup / login)

Rule: routers call services, services call repositories, repositories call the DB.
      No SQLAlchemy queries in routers. No FastAPI imports in services.
"""
