"""
Ledger bounded context — domain layer.

Users, their per-currency balances, and the exchange orders
they submit. Orders are recorded, never matched or settled.
"""
