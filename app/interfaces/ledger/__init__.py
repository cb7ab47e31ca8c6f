"""
HTTP interface for the ledger bounded context.

Exposes four POST routes (add_user, add_order, get_orders,
get_userdetail) under the configured API prefix.
"""
