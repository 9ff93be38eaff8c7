"""Seed file line parser.

Seed lines hold ``name,mail,job_type,email_verified,date``. The first four
fields are comma-separated; the date is whatever follows the fourth comma.
Trailing fields may be omitted and every missing or empty field takes its
default.
"""

from __future__ import annotations

from customer_db.domain.entities import CustomerFields
from customer_db.domain.value_objects import (
    atoi,
    job_type_from_int,
    parse_date,
    parse_flag,
    text_or_null,
)

SEED_FIELD_COUNT = 5


def strip_line_terminator(raw: str) -> str:
    """Cut a raw line at its first CR or LF."""
    for index, char in enumerate(raw):
        if char in "\r\n":
            return raw[:index]
    return raw


def parse_seed_line(raw: str) -> CustomerFields:
    """Parse one seed line into normalized fields.

    Example:
        >>> f = parse_seed_line("Bob,bob@x.com,3,1,7.8.1985\\n")
        >>> f.job_type.name, f.email_verified, f.date_of_birth.render()
        ('MOBILE_DEVELOPER', True, '07.08.1985')
    """
    parts = strip_line_terminator(raw).split(",", SEED_FIELD_COUNT - 1)
    parts += [""] * (SEED_FIELD_COUNT - len(parts))
    name, mail, job_type, email_verified, date_text = parts

    return CustomerFields(
        name=text_or_null(name),
        mail=text_or_null(mail),
        job_type=job_type_from_int(atoi(job_type)),
        email_verified=parse_flag(email_verified),
        date_of_birth=parse_date(date_text),
    )
