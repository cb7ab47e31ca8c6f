"""
Application layer for the ledger bounded context.

Use cases coordinate domain entities and ports to fulfill
ledger operations. No framework or infrastructure imports allowed.
"""
