"""
Ledger — HTTP front-end for a toy currency-exchange ledger.

Application package root. A small modular monolith using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - ledger: User registration, order submission, order and balance queries.

Layers:
    - domain: Entities, ports (ABCs), errors.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: In-memory adapters implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas, body parsing.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
