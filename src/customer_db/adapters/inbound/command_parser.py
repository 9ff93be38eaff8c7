"""Command parser for the customer quasi-SQL language.

The language is deliberately permissive. It is not a SQL grammar: each line
is matched against four fixed shapes and anything that does not fit becomes a
no-op rather than an error.

Supported shapes (verb and continuation are case-sensitive):
    - INSERT INTO CUSTOMER (name, mail, job_type, email_verified, date)
    - DELETE FROM CUSTOMER WHERE id=<n>
    - UPDATE CUSTOMER SET field=value[, field=value ...] WHERE id=<n>
    - TRUNCATE TABLE CUSTOMER

Line normalization: everything after the first ``;`` is a comment, line
terminators are dropped, and surrounding whitespace is trimmed. Blank lines
produce no plan at all.

Example:
    >>> parser = CommandParser()
    >>> plan = parser.parse("UPDATE CUSTOMER SET job_type=2 WHERE id=1;")
    >>> plan.customer_id, plan.assignments[0].field
    (1, <UpdatableField.JOB_TYPE: 'job_type'>)
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum

from customer_db.adapters.inbound.text_utils import normalize_token, split_quoted_list, trim
from customer_db.domain.entities import CustomerFields
from customer_db.domain.value_objects import (
    ASCII_WHITESPACE,
    CustomerId,
    atoi,
    job_type_from_int,
    parse_date,
    parse_flag,
    parse_int_prefix,
)

INSERT_FIELD_COUNT = 5

SET_MARKER = " SET "
UPDATE_WHERE_MARKER = " WHERE id="
DELETE_WHERE_MARKER = "WHERE id="

_LINE_TERMINATOR = re.compile(r"[\r\n]")


class StatementType(Enum):
    """Verbs recognized by the parser."""

    INSERT = "INSERT"
    DELETE = "DELETE"
    UPDATE = "UPDATE"
    TRUNCATE = "TRUNCATE"
    NOOP = "NOOP"


class UpdatableField(Enum):
    """Fields an UPDATE may assign, keyed by their SET-clause name."""

    NAME = "name"
    MAIL = "mail"
    JOB_TYPE = "job_type"
    EMAIL_VERIFIED = "email_verified"
    DATE = "date"


# SET-clause names; "email" is accepted as an alias for "mail".
_FIELD_NAMES: dict[str, UpdatableField] = {
    "name": UpdatableField.NAME,
    "email": UpdatableField.MAIL,
    "mail": UpdatableField.MAIL,
    "job_type": UpdatableField.JOB_TYPE,
    "email_verified": UpdatableField.EMAIL_VERIFIED,
    "date": UpdatableField.DATE,
}

# Required continuation after each verb.
_CONTINUATIONS: dict[str, tuple[StatementType, str]] = {
    "INSERT": (StatementType.INSERT, "INTO CUSTOMER"),
    "DELETE": (StatementType.DELETE, "FROM CUSTOMER"),
    "UPDATE": (StatementType.UPDATE, "CUSTOMER"),
    "TRUNCATE": (StatementType.TRUNCATE, "TABLE CUSTOMER"),
}


@dataclass
class Assignment:
    """One ``field=value`` item of a SET clause, value already unquoted."""

    field: UpdatableField
    value: str

    def __str__(self) -> str:
        return f"{self.field.value}={self.value}"


@dataclass
class CommandPlan(ABC):
    """Base class for parsed commands."""

    @property
    @abstractmethod
    def statement_type(self) -> StatementType:
        pass


@dataclass
class InsertPlan(CommandPlan):
    """Append a new customer built from fields."""

    fields: CustomerFields

    @property
    def statement_type(self) -> StatementType:
        return StatementType.INSERT

    def __str__(self) -> str:
        return f"Insert(name={self.fields.name!r})"


@dataclass
class DeletePlan(CommandPlan):
    """Remove every customer with the given id.

    customer_id is None when the WHERE marker was missing or its id could not
    be scanned; such a plan is a no-op.
    """

    customer_id: CustomerId | None

    @property
    def statement_type(self) -> StatementType:
        return StatementType.DELETE

    def __str__(self) -> str:
        return f"Delete(id={self.customer_id})"


@dataclass
class UpdatePlan(CommandPlan):
    """Assign fields of one customer.

    well_formed is False when the SET/WHERE markers are missing or out of
    order; customer_id is None when the id after the WHERE marker could not
    be scanned. Either condition makes the update fail.
    """

    customer_id: CustomerId | None
    assignments: list[Assignment] = field(default_factory=list)
    well_formed: bool = True

    @property
    def statement_type(self) -> StatementType:
        return StatementType.UPDATE

    def __str__(self) -> str:
        assigns = ", ".join(str(a) for a in self.assignments)
        return f"Update(SET {assigns} WHERE id={self.customer_id})"


@dataclass
class TruncatePlan(CommandPlan):
    """Remove all customers and rewind the id sequence."""

    @property
    def statement_type(self) -> StatementType:
        return StatementType.TRUNCATE

    def __str__(self) -> str:
        return "Truncate()"


@dataclass
class NoOpPlan(CommandPlan):
    """A line that matched no command shape, or lacked a required part."""

    reason: str = ""

    @property
    def statement_type(self) -> StatementType:
        return StatementType.NOOP

    def __str__(self) -> str:
        return f"NoOp({self.reason})"


def normalize_line(raw: str) -> str:
    """Drop line terminators and the ``;`` comment, then trim."""
    line = _LINE_TERMINATOR.split(raw, maxsplit=1)[0]
    line = line.split(";", 1)[0]
    return trim(line)


def split_verb(line: str) -> tuple[str, str]:
    """Split a normalized line into its verb and parameter string."""
    verb, sep, params = line.partition(" ")
    if not sep:
        return line, ""
    return verb, params.lstrip(ASCII_WHITESPACE)


def parse_insert_values(text: str) -> CustomerFields:
    """Parse an INSERT value list into normalized fields.

    Positions are name, mail, job-type ordinal, email-verified flag and date.
    Empty or missing positions keep their defaults.

    Example:
        >>> parse_insert_values('("Smith, John", j@x.com, 1, false, 5.5.2000)').name
        'Smith, John'
    """
    fields = CustomerFields()
    tokens = split_quoted_list(text, INSERT_FIELD_COUNT)

    for index, token in enumerate(tokens):
        if not token:
            continue
        if index == 0:
            fields.name = token
        elif index == 1:
            fields.mail = token
        elif index == 2:
            fields.job_type = job_type_from_int(atoi(token))
        elif index == 3:
            fields.email_verified = parse_flag(token)
        elif index == 4:
            fields.date_of_birth = parse_date(token)

    return fields


def parse_set_clause(params: str) -> UpdatePlan:
    """Parse the ``SET ... WHERE id=`` part of an UPDATE.

    Args:
        params: Parameter string following the UPDATE verb.

    Returns:
        An UpdatePlan. Unknown field names, items without ``=`` and items
        with nothing after ``=`` are dropped, leaving those fields untouched.
        The plan is flagged malformed when SET does not precede the WHERE
        marker.
    """
    set_pos = params.find(SET_MARKER)
    where_pos = params.find(UPDATE_WHERE_MARKER)
    if set_pos < 0 or where_pos < 0 or set_pos > where_pos:
        return UpdatePlan(customer_id=None, well_formed=False)

    body = params[set_pos + len(SET_MARKER):where_pos]
    customer_id = parse_int_prefix(params[where_pos + len(UPDATE_WHERE_MARKER):])

    assignments: list[Assignment] = []
    for item in body.split(","):
        if not item:
            continue
        name, sep, value = item.partition("=")
        if not sep or not value:
            continue
        target = _FIELD_NAMES.get(trim(name))
        if target is None:
            continue
        assignments.append(Assignment(field=target, value=normalize_token(value)))

    return UpdatePlan(
        customer_id=CustomerId(customer_id) if customer_id is not None else None,
        assignments=assignments,
    )


class CommandParser:
    """Parser that turns command lines into plans.

    Parsing never raises: malformed input becomes a NoOpPlan, a DeletePlan
    without an id, or a malformed UpdatePlan.

    Example:
        >>> parser = CommandParser()
        >>> print(parser.parse("DELETE FROM CUSTOMER WHERE id=3"))
        Delete(id=3)
        >>> parser.parse("   ; only a comment") is None
        True
    """

    def parse(self, raw_line: str) -> CommandPlan | None:
        """Parse one raw command line.

        Args:
            raw_line: Line as read from the command source.

        Returns:
            The parsed plan, or None for a blank (or comment-only) line.
        """
        line = normalize_line(raw_line)
        if not line:
            return None

        verb, params = split_verb(line)
        shape = _CONTINUATIONS.get(verb)
        if shape is None:
            return NoOpPlan(reason=f"unknown verb {verb!r}")

        statement_type, continuation = shape
        if not params.startswith(continuation):
            return NoOpPlan(reason=f"{verb} without {continuation!r}")

        if statement_type is StatementType.INSERT:
            return self._parse_insert(params[len(continuation):].lstrip(ASCII_WHITESPACE))
        if statement_type is StatementType.DELETE:
            return self._parse_delete(params)
        if statement_type is StatementType.UPDATE:
            return parse_set_clause(params)
        return TruncatePlan()

    def _parse_insert(self, params: str) -> CommandPlan:
        open_paren = params.find("(")
        if open_paren < 0:
            return NoOpPlan(reason="INSERT without value list")
        return InsertPlan(fields=parse_insert_values(params[open_paren:]))

    def _parse_delete(self, params: str) -> DeletePlan:
        where_pos = params.find(DELETE_WHERE_MARKER)
        if where_pos < 0:
            return DeletePlan(customer_id=None)
        customer_id = parse_int_prefix(params[where_pos + len(DELETE_WHERE_MARKER):])
        return DeletePlan(
            customer_id=CustomerId(customer_id) if customer_id is not None else None
        )
