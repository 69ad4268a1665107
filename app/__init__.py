"""
Crypto Accounts: user accounts with crypto wallets and watchlists.

Application package root. This is a small service using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - accounts: Users, profiles, wallet transactions, watchlists.

Layers:
    - domain: Entities, aggregate factory, ports (ABCs), errors.
    - application: Service ports, DTOs, the user management service.
    - infrastructure: MongoDB repository, JWT verification.
    - interfaces: FastAPI routers, Pydantic schemas, auth dependency.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
