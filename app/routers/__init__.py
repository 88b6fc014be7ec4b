"""Routers package: HTTP endpoint definitions.

Files:
  auth.py       - /signup, /login
  vendors.py    - REFERENCE router pattern (/vendors)
  suppliers.py  - /suppliers
  contracts.py  - /contracts

Rule: Routers only handle HTTP (request parsing, response shaping).
      All business logic delegates to app/services/.
"""
