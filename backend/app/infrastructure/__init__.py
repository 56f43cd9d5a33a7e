"""Infrastructure Layer — database access, repositories, and logging setup.

Invariants:
    - All store failures leave this layer as StoreError or ConstraintViolationError
"""
