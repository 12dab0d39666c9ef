"""Pydantic Schemas - request/response validation for API endpoints.

Invariants:
    - Schemas validate at the system boundary (user input, API responses)
    - Enum labels arrive as free strings and are resolved by services
      (unknown labels are a 404, not a validation error)
    - Response models read straight from ORM rows (from_attributes)

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
    - Create schemas carry required fields; Update schemas are all-optional (PATCH)
"""
