"""Services Layer - business flows between routes and repositories.

Invariants:
    - Services own the transaction: they commit, repositories only flush
    - Path coordinates are checked through Verifier before anything is read or written
    - Domain failures raised as core.errors types, never HTTPException
"""
