"""Date-of-birth value object.

Dates travel as ``D.M.Y`` text. The all-zero date is the sentinel for an
unknown date of birth and is produced for any input that cannot be scanned.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

SENTINEL_DATE_TEXT = "0.0.0"

# ASCII digits only. Each field may be preceded by whitespace; the dots must
# follow directly.
_DATE_PATTERN = re.compile(
    r"[ \t\n\r\v\f]*([+-]?[0-9]+)\."
    r"[ \t\n\r\v\f]*([+-]?[0-9]+)\."
    r"[ \t\n\r\v\f]*([+-]?[0-9]+)"
)


@dataclass(frozen=True, slots=True)
class BirthDate:
    """Day, month and year of birth.

    No calendar validation is applied: whatever integers were scanned are
    kept as-is.

    Example:
        >>> BirthDate(1, 2, 1990).render()
        '01.02.1990'
    """

    day: int
    month: int
    year: int

    @property
    def is_unknown(self) -> bool:
        """True for the 0/0/0 sentinel."""
        return self.day == 0 and self.month == 0 and self.year == 0

    def render(self) -> str:
        """Render as DD.MM.YYYY with zero padding."""
        return f"{self.day:02d}.{self.month:02d}.{self.year:04d}"

    def __str__(self) -> str:
        return self.render()


UNKNOWN_DATE = BirthDate(0, 0, 0)


def parse_date(text: str | None) -> BirthDate:
    """Parse ``D.M.Y`` text into a BirthDate.

    Args:
        text: Raw date text, possibly None.

    Returns:
        The scanned date, or UNKNOWN_DATE when the text is absent, empty,
        exactly "0.0.0", or does not start with three dot-separated integers.
        Text after the year is ignored.
    """
    if not text or text == SENTINEL_DATE_TEXT:
        return UNKNOWN_DATE

    match = _DATE_PATTERN.match(text)
    if match is None:
        return UNKNOWN_DATE

    day, month, year = (int(group) for group in match.groups())
    return BirthDate(day=day, month=month, year=year)
