"""INN Validation - format check for Russian taxpayer identification numbers.

Invariants:
    - Company INN is exactly 10 decimal digits
    - Format only: no checksum, no registry lookup
    - None is never valid
"""

import re

INN_PATTERN = re.compile(r"^\d{10}$")
INN_MESSAGE = "INN must be a 10-digit number"


def is_valid_inn(value: object) -> bool:
    """True when str(value) is exactly 10 digits."""
    if value is None or isinstance(value, bool):
        return False
    return INN_PATTERN.fullmatch(str(value)) is not None
