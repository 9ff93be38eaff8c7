"""Job type enumeration for customer records.

The job type is stored as one of eight fixed categories. Input arrives as an
integer ordinal; anything outside the defined range is folded into the first
category rather than rejected.
"""

from __future__ import annotations

from enum import IntEnum


class JobType(IntEnum):
    """Customer job categories, ordered by their wire ordinal."""

    BACKEND_DEVELOPER = 0
    FRONTEND_DEVELOPER = 1
    FULLSTACK_DEVELOPER = 2
    MOBILE_DEVELOPER = 3
    EMBEDDED_SOFTWARE_ENGINEER = 4
    GAME_DEVELOPER = 5
    DEVOPS_ENGINEER = 6
    TEST_ENGINEER = 7


JOB_TYPE_COUNT = len(JobType)

DEFAULT_JOB_TYPE = JobType.BACKEND_DEVELOPER

UNKNOWN_JOB_TYPE_NAME = "UNKNOWN_JOB_TYPE"
"""Display name for an ordinal that has no JobType member."""


def job_type_from_int(value: int) -> JobType:
    """Map an integer ordinal to a JobType.

    Args:
        value: Ordinal read from input.

    Returns:
        The matching JobType, or BACKEND_DEVELOPER when the ordinal is
        negative or not below JOB_TYPE_COUNT.
    """
    if 0 <= value < JOB_TYPE_COUNT:
        return JobType(value)
    return DEFAULT_JOB_TYPE


def job_type_to_name(job_type: JobType | int) -> str:
    """Return the display name used in snapshots."""
    if 0 <= int(job_type) < JOB_TYPE_COUNT:
        return JobType(int(job_type)).name
    return UNKNOWN_JOB_TYPE_NAME
