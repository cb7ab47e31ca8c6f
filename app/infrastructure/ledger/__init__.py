"""
Infrastructure adapters for the ledger bounded context.

Each adapter implements a domain port (ABC). Storage is
in-memory and lives as long as the application instance.
"""
