"""Inbound adapters for the customer database.

Inbound adapters turn incoming text into domain operations.

Exports:
    Command Parser:
        - CommandParser: Turns command lines into plans
        - CommandPlan: Base class for parsed commands
        - InsertPlan, DeletePlan, UpdatePlan, TruncatePlan, NoOpPlan
    Seed Parser:
        - parse_seed_line: Seed file line to CustomerFields
    Text Utilities:
        - trim, strip_quotes, normalize_token, split_quoted_list
"""

from customer_db.adapters.inbound.command_parser import (
    Assignment,
    CommandParser,
    CommandPlan,
    DeletePlan,
    InsertPlan,
    NoOpPlan,
    StatementType,
    TruncatePlan,
    UpdatableField,
    UpdatePlan,
    normalize_line,
    parse_insert_values,
    parse_set_clause,
    split_verb,
)
from customer_db.adapters.inbound.seed_parser import parse_seed_line, strip_line_terminator
from customer_db.adapters.inbound.text_utils import (
    normalize_token,
    scan_token_end,
    split_quoted_list,
    strip_quotes,
    trim,
)

__all__ = [
    # Command parser
    "CommandParser",
    "CommandPlan",
    "InsertPlan",
    "DeletePlan",
    "UpdatePlan",
    "TruncatePlan",
    "NoOpPlan",
    "Assignment",
    "StatementType",
    "UpdatableField",
    "normalize_line",
    "split_verb",
    "parse_insert_values",
    "parse_set_clause",
    # Seed parser
    "parse_seed_line",
    "strip_line_terminator",
    # Text utilities
    "trim",
    "strip_quotes",
    "normalize_token",
    "scan_token_end",
    "split_quoted_list",
]
