"""
Progress evaluation: is a learner on schedule for a timed course?

Given the course content duration, the learner's reported progress and the
assignment/due window, classify the learner and compute:
- expected progress as of "now" under even daily pacing
- the daily learning time still needed to finish by the due date

Boundary rules:
- A due date equal to "now" with unfinished progress counts as overdue.
- Inside the last 24 hours before the due date the remaining day count is 0;
  it is clamped to 1 so the whole remainder is due today.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from fractions import Fraction
from typing import Union

from pacing.clock import Clock
from pacing.days import ceil_div, days_between, round_half_up
from pacing.models import ProgressResult, ProgressStatus

logger = logging.getLogger(__name__)

COMPLETE = 100


def _whole_or_float(value: Fraction) -> Union[int, float]:
    return value.numerator if value.denominator == 1 else float(value)


def _to_utc(name: str, value: datetime) -> datetime:
    if value.tzinfo is None or value.utcoffset() is None:
        raise ValueError(f"{name} must be timezone-aware")
    # Same-tzinfo comparisons use wall-clock time; UTC keeps them on instants.
    return value.astimezone(timezone.utc)


def _expected_progress(
    course_duration: int,
    assignment_time: datetime,
    due_time: datetime,
    now: datetime,
) -> int:
    window_days = days_between(due_time, assignment_time)

    # Same-day or next-day window: the whole course is due in one day.
    if window_days < 2:
        return COMPLETE if due_time < now else 0

    # Ceiling keeps the last day's share at or below the daily quota.
    daily_quota = ceil_div(course_duration, window_days)
    reference = min(due_time, now)
    elapsed_days = days_between(assignment_time, reference)
    # Quota rounding can overshoot on long windows for short courses.
    return min(COMPLETE, round_half_up(elapsed_days * daily_quota * COMPLETE, course_duration))


def evaluate_progress(
    course_duration: int,
    progress_percent: int,
    assignment_time: datetime,
    due_time: datetime,
    now: datetime,
) -> ProgressResult:
    """
    Evaluate progress against the assignment/due window at instant `now`.

    Inputs are assumed validated upstream: course_duration >= 10,
    0 <= progress_percent <= 100, due_time after assignment_time and the
    window longer than course_duration seconds.
    """
    assignment_time = _to_utc("assignment_time", assignment_time)
    due_time = _to_utc("due_time", due_time)
    now = _to_utc("now", now)

    if due_time <= now and progress_percent < COMPLETE:
        remaining = Fraction(course_duration * (COMPLETE - progress_percent), COMPLETE)
        return ProgressResult(
            status=ProgressStatus.OVERDUE,
            expected_progress=COMPLETE,
            needed_daily_learning_time=_whole_or_float(remaining),
        )

    if now < assignment_time:
        return ProgressResult(
            status=ProgressStatus.ON_TRACK,
            expected_progress=0,
            needed_daily_learning_time=0,
        )

    expected = _expected_progress(course_duration, assignment_time, due_time, now)

    if progress_percent == COMPLETE or expected <= progress_percent:
        status = ProgressStatus.ON_TRACK
    else:
        status = ProgressStatus.NOT_ON_TRACK

    if progress_percent == COMPLETE:
        needed = 0
    else:
        remaining_days = max(1, days_between(due_time, now))
        needed = ceil_div(
            (COMPLETE - progress_percent) * course_duration,
            COMPLETE * remaining_days,
        )

    return ProgressResult(
        status=status,
        expected_progress=expected,
        needed_daily_learning_time=needed,
    )


class ProgressEvaluator:
    """
    Evaluates progress against the instant supplied by an injected clock.
    Stateless apart from the clock; safe to share between requests.
    """

    def __init__(self, clock: Clock):
        self.clock = clock

    def evaluate(
        self,
        course_duration: int,
        progress_percent: int,
        assignment_time: datetime,
        due_time: datetime,
    ) -> ProgressResult:
        now = self.clock.now()
        result = evaluate_progress(course_duration, progress_percent, assignment_time, due_time, now)
        logger.debug(
            "progress evaluated now=%s status=%s expected=%s needed=%s",
            now.isoformat(), result.status.value, result.expected_progress, result.needed_daily_learning_time,
        )
        return result
