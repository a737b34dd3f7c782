import logging
from typing import AbstractSet, List, Sequence

from .models import Teacher
from .timetable import can_teach, day_row, is_occupied

logger = logging.getLogger(__name__)


def find_eligible_substitutes(
    roster: Sequence[Teacher],
    absent_teacher: Teacher,
    absent_teacher_ids: AbstractSet[str],
    day_index: int,
    period: int,
    class_label: str,
) -> List[Teacher]:
    """
    Narrows the roster to teachers who could take `class_label` at (day_index, period):
    1. not the absent teacher and not absent themselves,
    2. have a usable timetable row for that day,
    3. are free that period,
    4. hold a designation allowed for the class level.
    Roster order is preserved.
    """
    period_index = period - 1
    eligible: List[Teacher] = []

    for teacher in roster:
        if teacher.id == absent_teacher.id or teacher.id in absent_teacher_ids:
            continue

        row = day_row(teacher.timetable, day_index)
        if row is None:
            logger.debug("Skipping %s: no usable timetable for day index %d", teacher.id, day_index)
            continue

        if is_occupied(row[period_index]):
            continue

        if not can_teach(teacher.designation, class_label):
            continue

        eligible.append(teacher)

    return eligible
