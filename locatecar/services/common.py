"""Shared service helpers."""

from typing import Optional

from locatecar.utils.constants import DEFAULT_PAGE_SIZE

_TRUE = {"1", "true", "yes", "y", "on"}
_FALSE = {"0", "false", "no", "n", "off"}


def round2(x: float) -> float:
    return round(float(x), 2)


def _lc(s) -> str:
    """Safe lowercase for case-insensitive compare."""
    return (s or "").lower()


def norm_plate(value: Optional[str]) -> str:
    """Trim and uppercase a plate; '' for None."""
    return (value or "").strip().upper()


def clean_text(value) -> str:
    """Trimmed text of a JSON value; '' for None. Numbers become their string form."""
    return "" if value is None else str(value).strip()


def to_int_safe(value, default: int) -> int:
    """Convert to int; return `default` if invalid."""
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def to_bool_safe(value) -> Optional[bool]:
    """Parse 'true'/'false'-like strings; None when missing or unrecognised."""
    if isinstance(value, bool):
        return value
    s = _lc(value).strip()
    if s in _TRUE:
        return True
    if s in _FALSE:
        return False
    return None


def page_args(page, size, default_size: int = DEFAULT_PAGE_SIZE) -> tuple[int, int]:
    """Lenient page/size parsing for query strings (page 1 by default)."""
    return to_int_safe(page, 1), to_int_safe(size, default_size)
