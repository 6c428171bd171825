"""
Progress-status request and response schemas.

Field errors are collected by pydantic in a single pass; the custom error
types below carry their final client-facing message.
"""

import re
from datetime import datetime
from typing import Union

from pydantic import BaseModel, Field, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

COURSE_DURATION_MIN = 10
PROGRESS_PERCENT_MIN = 0
PROGRESS_PERCENT_MAX = 100

# RFC 3339 with whole seconds and an explicit offset (PHP's Y-m-d\TH:i:sP).
RFC3339_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(?:Z|[+-]\d{2}:\d{2})$")
RFC3339_FORMAT = "Y-m-d\\TH:i:sP"
RFC3339_EXAMPLE = "2020-01-30T00:00:01+00:00"


def parse_rfc3339(value: str) -> datetime:
    """Parse a strict RFC 3339 timestamp. Raises ValueError for anything else."""
    if not RFC3339_PATTERN.match(value):
        raise ValueError(f"not an RFC 3339 timestamp: {value!r}")
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


class ProgressStatusQuery(BaseModel):
    course_duration: int = Field(ge=COURSE_DURATION_MIN, description="Total content duration in seconds")
    progress_percent: int = Field(ge=PROGRESS_PERCENT_MIN, le=PROGRESS_PERCENT_MAX)
    assignment_date: datetime
    due_date: datetime

    @field_validator("assignment_date", "due_date", mode="before")
    @classmethod
    def must_match_rfc3339(cls, value, info: ValidationInfo):
        attribute = info.field_name.replace("_", " ")
        if isinstance(value, datetime) and value.utcoffset() is not None:
            return value
        if isinstance(value, str):
            try:
                return parse_rfc3339(value)
            except ValueError:
                pass
        raise PydanticCustomError(
            "date_format",
            "The {attribute} does not match the format {format}. Ex.: {example}",
            {"attribute": attribute, "format": RFC3339_FORMAT, "example": RFC3339_EXAMPLE},
        )

    @field_validator("due_date")
    @classmethod
    def must_follow_assignment(cls, value: datetime, info: ValidationInfo) -> datetime:
        # info.data only holds assignment_date when it validated successfully.
        assignment = info.data.get("assignment_date")
        if assignment is not None and value <= assignment:
            raise PydanticCustomError("date_after", "The due date must be a date after assignment date.")
        return value


class ProgressStatusResponse(BaseModel):
    progress_status: str
    expected_progress: int
    needed_daily_learning_time: Union[int, float]
