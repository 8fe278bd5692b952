"""
Mobile API Backend — Repositories
==================================

What:  Persistence adapters that own a table's queries.

Inventory:
    - AccountRepository: the credential store (accounts table)
"""
