"""Calendar dates as used for birth dates and age calculations."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Date:
    """A day/month/year date."""

    day: int
    month: int
    year: int

    def _key(self) -> tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def compare(self, other: Date) -> int:
        """Return 1 if this date is older, -1 if ``other`` is older, 0 if equal."""
        if self._key() < other._key():
            return 1
        if self._key() == other._key():
            return 0
        return -1

    def years_until(self, current: Date) -> int:
        """Whole years elapsed from this date up to ``current``."""
        years = current.year - self.year
        if (current.month, current.day) < (self.month, self.day):
            years -= 1
        return years

    def __str__(self) -> str:
        return f"{self.day}/{self.month}/{self.year}"


def parse_date(text: str) -> Date:
    """Parse a ``day/month/year`` string."""
    parts = text.strip().split("/")
    if len(parts) != 3:
        raise ValueError(f"invalid date: {text!r}")
    try:
        day, month, year = (int(part) for part in parts)
    except ValueError as exc:
        raise ValueError(f"invalid date: {text!r}") from exc
    return Date(day, month, year)