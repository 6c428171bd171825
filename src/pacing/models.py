from dataclasses import dataclass
from enum import Enum
from typing import Union


class ProgressStatus(str, Enum):
    """Progress status labels, as sent over the wire."""
    ON_TRACK = "on track"
    NOT_ON_TRACK = "not on track"
    OVERDUE = "overdue"


@dataclass(frozen=True)
class ProgressResult:
    status: ProgressStatus
    expected_progress: int  # percent, 0-100
    # Seconds per remaining day; the whole remainder once overdue.
    needed_daily_learning_time: Union[int, float]

    def as_dict(self) -> dict:
        return {
            "progress_status": self.status.value,
            "expected_progress": self.expected_progress,
            "needed_daily_learning_time": self.needed_daily_learning_time,
        }
