"""Presence and range checks shared by the creation contracts."""

import math
from typing import Any

from src.crudhub.core.errors import ValidationError


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def require_fields(**values: Any) -> None:
    """Raise ValidationError naming every argument that is None or a blank string."""
    missing = [name for name, value in values.items() if is_blank(value)]
    if missing:
        raise ValidationError.missing(*missing)


def check_price(price: float, field: str = "price") -> None:
    """Reject prices that are negative or not finite (inf, NaN)."""
    if not math.isfinite(price) or price < 0:
        raise ValidationError(
            f"{field} must be a finite number >= 0", {"fields": [field]}
        )


def check_page(offset: int, limit: int | None) -> None:
    if offset < 0:
        raise ValidationError("offset must be >= 0", {"offset": offset})
    if limit is not None and limit < 1:
        raise ValidationError("limit must be >= 1", {"limit": limit})
