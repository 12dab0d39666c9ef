"""Infrastructure Layer - database session management and logging setup.

Invariants:
    - Infrastructure never imports domain services
    - Every SQLAlchemy failure surfaces as core.errors.DatabaseError
"""
