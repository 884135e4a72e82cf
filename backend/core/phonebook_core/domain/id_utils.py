from __future__ import annotations

import re
import uuid
from typing import Container, Final


CONTACT_ID_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$"
)


def validate_contact_id(value: str) -> bool:
    if not value:
        return False
    return bool(CONTACT_ID_PATTERN.fullmatch(value))


def generate_contact_id(taken: Container[str] = ()) -> str:
    """Return a time-based UUID string that is not in ``taken``."""
    while True:
        candidate = str(uuid.uuid1())
        if candidate not in taken:
            return candidate
