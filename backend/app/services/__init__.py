"""Services Layer — orchestration between the API routes and repositories.

Invariants:
    - Services depend on repository Protocols, never on SQLAlchemy directly
"""
