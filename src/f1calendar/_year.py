"""Season year token validation."""

from __future__ import annotations

import re
from typing import NamedTuple

from f1calendar._clock import Clock, current_year

CURRENT_SEASON = "current"
F1_MIN_YEAR = 1950  # first world championship season
OPENF1_MIN_YEAR = 2023  # OpenF1 has no meetings before 2023

_YEAR_RE = re.compile(r"[0-9]{4}")


class YearCheck(NamedTuple):
    valid: bool
    error: str | None = None


def max_year(clock: Clock) -> int:
    """Latest accepted season: next year, so upcoming calendars can be queried."""
    return current_year(clock) + 1


def validate_year(token: str, clock: Clock) -> YearCheck:
    """Check a season token: ``"current"`` or a four-digit year in range.

    Args:
        token: Raw path parameter.
        clock: Source of the current calendar year (upper bound is year + 1).

    Returns:
        ``YearCheck(True)`` or ``YearCheck(False, message)``.
    """
    if token == CURRENT_SEASON:
        return YearCheck(True)

    if not _YEAR_RE.fullmatch(token):
        return YearCheck(False, 'Ano inválido. Use um ano de 4 dígitos ou "current".')

    upper = max_year(clock)
    if not F1_MIN_YEAR <= int(token) <= upper:
        return YearCheck(False, f"Ano deve estar entre {F1_MIN_YEAR} e {upper}.")

    return YearCheck(True)


def resolve_year(token: str, clock: Clock) -> int:
    """Concrete season for an already validated token."""
    if token == CURRENT_SEASON:
        return current_year(clock)
    return int(token)
