"""Client — consumes GET /api/users and renders the result.

Invariants:
    - Client code imports only schemas/ and config from the backend package
"""
