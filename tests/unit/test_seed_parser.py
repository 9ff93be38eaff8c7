"""Unit tests for seed line parsing."""

import pytest

from customer_db.adapters.inbound import parse_seed_line, strip_line_terminator
from customer_db.domain.value_objects import UNKNOWN_DATE, BirthDate, JobType


@pytest.mark.unit
class TestSeedParser:
    """Tests for parse_seed_line."""

    def test_full_line(self) -> None:
        fields = parse_seed_line("Alice,alice@x.com,2,true,01.02.1990\n")

        assert fields.name == "Alice"
        assert fields.mail == "alice@x.com"
        assert fields.job_type is JobType.FULLSTACK_DEVELOPER
        assert fields.email_verified is True
        assert fields.date_of_birth == BirthDate(1, 2, 1990)

    def test_crlf_line(self) -> None:
        fields = parse_seed_line("Bob,bob@x.com,6,0,3.4.1975\r\n")
        assert fields.job_type is JobType.DEVOPS_ENGINEER
        assert fields.email_verified is False
        assert fields.date_of_birth == BirthDate(3, 4, 1975)

    def test_truncated_line(self) -> None:
        fields = parse_seed_line("Carol\n")

        assert fields.name == "Carol"
        assert fields.mail == "null"
        assert fields.job_type is JobType.BACKEND_DEVELOPER
        assert fields.email_verified is False
        assert fields.date_of_birth == UNKNOWN_DATE

    def test_empty_field_takes_default(self) -> None:
        fields = parse_seed_line(",d@x.com,,1,\n")
        assert fields.name == "null"
        assert fields.mail == "d@x.com"
        assert fields.email_verified is True

    def test_blank_line_gives_defaults(self) -> None:
        fields = parse_seed_line("\n")
        assert fields.name == "null"
        assert fields.date_of_birth == UNKNOWN_DATE

    def test_date_keeps_trailing_commas(self) -> None:
        fields = parse_seed_line("Eve,e@x.com,1,1,9.9.1999,extra\n")
        assert fields.date_of_birth == BirthDate(9, 9, 1999)

    def test_invalid_job_type(self) -> None:
        assert parse_seed_line("F,f@x.com,-3").job_type is JobType.BACKEND_DEVELOPER

    def test_strip_line_terminator(self) -> None:
        assert strip_line_terminator("abc\r\ndef") == "abc"
        assert strip_line_terminator("abc") == "abc"
