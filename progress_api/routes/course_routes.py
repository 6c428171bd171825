"""
Course progress endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from pacing import Clock, ProgressEvaluator
from progress_api.config import get_clock
from progress_api.models.models import User
from progress_api.schemas.progress_schemas import ProgressStatusQuery, ProgressStatusResponse
from progress_api.utils.auth import get_current_user
from progress_api.utils.logger import configure_logging
from progress_api.utils.validation import InvalidDataError

logger = configure_logging()

course_routes = APIRouter(prefix="/course", tags=["course"])

WINDOW_TOO_SHORT = "The due date is too close to the assignment date!"


def get_evaluator(clock: Clock = Depends(get_clock)) -> ProgressEvaluator:
    return ProgressEvaluator(clock)


@course_routes.get("/progress-status", response_model=ProgressStatusResponse)
def progress_status(
    query: Annotated[ProgressStatusQuery, Query()],
    current_user: User = Depends(get_current_user),
    evaluator: ProgressEvaluator = Depends(get_evaluator),
) -> ProgressStatusResponse:
    """
    Check whether the learner is on schedule for a course.

    The window between assignment and due date must be longer than the
    course duration, otherwise the content cannot fit in it.
    """
    window_seconds = (query.due_date - query.assignment_date).total_seconds()
    if window_seconds <= query.course_duration:
        logger.warning(
            "progress window too short user_id=%s window_s=%s duration_s=%s",
            current_user.id, int(window_seconds), query.course_duration,
        )
        raise InvalidDataError.for_field("due_date", WINDOW_TOO_SHORT)

    result = evaluator.evaluate(
        query.course_duration,
        query.progress_percent,
        query.assignment_date,
        query.due_date,
    )
    logger.info(
        "progress status user_id=%s status=%s expected=%s needed=%s",
        current_user.id, result.status.value, result.expected_progress, result.needed_daily_learning_time,
    )
    return ProgressStatusResponse(**result.as_dict())
