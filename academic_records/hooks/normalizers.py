"""String normalization applied before uniqueness checks and storage.

All functions are pure and idempotent: ``f(f(x)) == f(x)``. ``None`` is
passed through untouched so callers can normalize optional fields.
"""

import re
from typing import Any, Optional

_IDENTIFIER_SEPARATORS = re.compile(r"[.\-\s]")
_WHITESPACE = re.compile(r"\s+")


def normalize_identifier(value: Any) -> Optional[str]:
    """Strip dots, hyphens and whitespace from an identity or staff number.

    Example:
        normalize_identifier(" 12.345-678 ")  # "12345678"
    """
    if value is None:
        return None
    return _IDENTIFIER_SEPARATORS.sub("", str(value)).strip()


def normalize_code(value: Any) -> Optional[str]:
    """Trim, drop internal whitespace and upper-case a program code.

    Example:
        normalize_code(" lic mat ")  # "LICMAT"
    """
    if value is None:
        return None
    return _WHITESPACE.sub("", str(value).strip()).upper()


def normalize_name(value: Any) -> Optional[str]:
    """Trim and collapse whitespace runs to a single space.

    Example:
        normalize_name("  Algebra   Lineal ")  # "Algebra Lineal"
    """
    if value is None:
        return None
    return _WHITESPACE.sub(" ", str(value)).strip()
