"""Tenor reference data."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Tenor:
    """A financing duration offered to customers, e.g. 6 months."""

    duration_months: int
    description: str = ""
    id: Optional[int] = None
