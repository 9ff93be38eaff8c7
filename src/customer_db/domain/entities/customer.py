"""Customer entity.

A customer is the only record type held by the store. Its id is assigned at
creation and never changes; every other field may be overwritten in place by
an UPDATE.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from customer_db.domain.value_objects import (
    DEFAULT_JOB_TYPE,
    NULL_TEXT,
    UNKNOWN_DATE,
    BirthDate,
    CustomerId,
    JobType,
)


@dataclass(slots=True)
class CustomerFields:
    """Normalized field values for a customer that has no id yet.

    Produced by the seed and INSERT parsers; defaults match an entirely
    empty input line.
    """

    name: str = NULL_TEXT
    mail: str = NULL_TEXT
    job_type: JobType = DEFAULT_JOB_TYPE
    email_verified: bool = False
    date_of_birth: BirthDate = field(default=UNKNOWN_DATE)


@dataclass(slots=True)
class Customer:
    """A live customer record.

    Attributes:
        id: Store-assigned identifier, unique among live records.
        name: Customer name, "null" when unknown.
        mail: E-mail address, "null" when unknown.
        job_type: One of the JobType categories.
        email_verified: Whether the address has been verified.
        date_of_birth: Birth date, 0/0/0 when unknown.
    """

    id: CustomerId
    name: str = NULL_TEXT
    mail: str = NULL_TEXT
    job_type: JobType = DEFAULT_JOB_TYPE
    email_verified: bool = False
    date_of_birth: BirthDate = field(default=UNKNOWN_DATE)

    @classmethod
    def from_fields(cls, customer_id: CustomerId, fields: CustomerFields) -> Customer:
        """Build a customer from parsed fields and a freshly allocated id."""
        return cls(
            id=customer_id,
            name=fields.name,
            mail=fields.mail,
            job_type=fields.job_type,
            email_verified=fields.email_verified,
            date_of_birth=fields.date_of_birth,
        )

    def has_id(self, customer_id: int) -> bool:
        return self.id == customer_id
