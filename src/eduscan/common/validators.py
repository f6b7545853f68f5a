from __future__ import annotations

from typing import Iterable

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def split_subjects(value: str | Iterable[str]) -> list[str]:
    """Accept "Math, Science" or a list; drop blanks, keep order."""
    items = value.split(",") if isinstance(value, str) else list(value)
    return [s.strip() for s in items if s and s.strip()]
