"""Value objects for the customer database domain.

Value objects are immutable types (or small stateless codecs) that represent
domain concepts.

Exports:
    Job types:
        - JobType: The eight job categories
        - job_type_from_int, job_type_to_name: Ordinal and display codecs

    Dates:
        - BirthDate: Day/month/year with a 0/0/0 "unknown" sentinel
        - parse_date: Tolerant D.M.Y parser

    Identifiers:
        - CustomerId: Type-safe customer id
        - IdAllocator: Sequential id source

    Codecs:
        - text_or_null, parse_flag, atoi, parse_int_prefix
"""

from customer_db.domain.value_objects.birth_date import (
    SENTINEL_DATE_TEXT,
    UNKNOWN_DATE,
    BirthDate,
    parse_date,
)
from customer_db.domain.value_objects.codecs import (
    ASCII_WHITESPACE,
    NULL_TEXT,
    atoi,
    parse_flag,
    parse_int_prefix,
    text_or_null,
)
from customer_db.domain.value_objects.identifiers import (
    FIRST_CUSTOMER_ID,
    CustomerId,
    IdAllocator,
)
from customer_db.domain.value_objects.job_type import (
    DEFAULT_JOB_TYPE,
    JOB_TYPE_COUNT,
    UNKNOWN_JOB_TYPE_NAME,
    JobType,
    job_type_from_int,
    job_type_to_name,
)

__all__ = [
    # Job types
    "JobType",
    "JOB_TYPE_COUNT",
    "DEFAULT_JOB_TYPE",
    "UNKNOWN_JOB_TYPE_NAME",
    "job_type_from_int",
    "job_type_to_name",
    # Dates
    "BirthDate",
    "UNKNOWN_DATE",
    "SENTINEL_DATE_TEXT",
    "parse_date",
    # Identifiers
    "CustomerId",
    "FIRST_CUSTOMER_ID",
    "IdAllocator",
    # Codecs
    "ASCII_WHITESPACE",
    "NULL_TEXT",
    "atoi",
    "parse_flag",
    "parse_int_prefix",
    "text_or_null",
]
