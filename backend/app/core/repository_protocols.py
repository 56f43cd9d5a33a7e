"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Implementations provided by shell via dependency injection
    - Implementations hold no state between calls (no result caching)

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no base class
"""

from typing import Protocol

from app.core.domain_types import User


class UserRepository(Protocol):
    """Contract for reading users from the store — implemented by shell.

    list_users raises StoreError on any store failure; it never returns
    a partial list.
    """
    async def list_users(self) -> list[User]: ...
