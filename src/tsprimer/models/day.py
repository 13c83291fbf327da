__all__ = [
    "Day",
    "get_day_type",
]
from enum import Enum
from typing import Annotated

from typing_extensions import Doc


class Day(Enum):
    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


WEEKEND = frozenset({Day.SATURDAY, Day.SUNDAY})


def get_day_type(
    day: Annotated[Day, Doc("Day of the week.")],
) -> Annotated[str, Doc('Either "weekend" or "weekday".')]:
    """Classify a day of the week."""
    return "weekend" if day in WEEKEND else "weekday"
