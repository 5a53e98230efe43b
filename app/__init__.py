"""
UserAPI — user management service.

Application package root. This is a small modular monolith using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - users: Registration, lookup, update and removal of users.

Layers:
    - domain: User entity, validation, error taxonomy, repository port.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: SQLAlchemy adapters implementing domain ports.
    - interfaces: FastAPI routers (HTTP + JSON-RPC), Pydantic schemas.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
