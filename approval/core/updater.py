"""Partial Update - copy populated fields of an update source onto a record.

Invariants:
    - A field is copied only when the target already has an attribute of that name
    - None values and values whose str() is blank are skipped
    - The target is mutated in place and returned; the source is never touched
    - Works on mappings, pydantic models and plain objects alike
"""

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


def _source_fields(source: Any) -> dict[str, Any]:
    if isinstance(source, Mapping):
        return dict(source)
    if isinstance(source, BaseModel):
        return source.model_dump()
    return {k: v for k, v in vars(source).items() if not k.startswith("_")}


def has_content(value: Any) -> bool:
    """Non-None and not blank once stringified."""
    return value is not None and str(value).strip() != ""


def apply_partial_update(target: T, source: Any) -> T:
    """Copy every populated field of source onto target. Pure apart from target."""
    for name, value in _source_fields(source).items():
        if hasattr(target, name) and has_content(value):
            setattr(target, name, value)
    return target
