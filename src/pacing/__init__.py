"""
Course pacing core: progress evaluation, clock abstraction, day/rounding helpers.

Example:
    from pacing import ProgressEvaluator, SystemClock
    result = ProgressEvaluator(SystemClock()).evaluate(30000, 40, assigned, due)
"""

from pacing.clock import Clock, FixedClock, SystemClock
from pacing.days import ceil_div, days_between, round_half_up
from pacing.evaluator import ProgressEvaluator, evaluate_progress
from pacing.models import ProgressResult, ProgressStatus

__all__ = [
    "Clock",
    "FixedClock",
    "SystemClock",
    "ceil_div",
    "days_between",
    "round_half_up",
    "ProgressEvaluator",
    "evaluate_progress",
    "ProgressResult",
    "ProgressStatus",
]
