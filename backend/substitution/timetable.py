import re
from datetime import date, datetime
from enum import Enum
from typing import Any, Optional, Sequence

DAYS_PER_WEEK = 6
PERIODS_PER_DAY = 8

WEEKDAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]

_LEADING_DIGITS = re.compile(r"^([0-9]+)")
MAX_CLASS_DIGITS = 3


# --- 1. Designations and Class Levels ---

class Designation(str, Enum):
    """Staff designation categories. PGT and TGT are interchangeable for secondary classes."""
    PGT = "PGT"      # senior-secondary qualified
    TGT = "TGT"      # graduate qualified
    PRT = "PRT"      # primary qualified
    OTHER = "OTHER"


SECONDARY_DESIGNATIONS = frozenset({Designation.PGT, Designation.TGT})


class ClassLevel(str, Enum):
    PRIMARY = "PRIMARY"
    SECONDARY = "SECONDARY"
    UNCLASSIFIED = "UNCLASSIFIED"


def class_number(class_label: str) -> int:
    """
    Extracts the leading ASCII class number ("5A" -> 5, "10B" -> 10). Returns 0 when there
    is none or the prefix is too long to be a class number.
    """
    match = _LEADING_DIGITS.match(class_label or "")
    if not match:
        return 0
    digits = match.group(1).lstrip("0")
    if not digits or len(digits) > MAX_CLASS_DIGITS:
        return 0
    return int(digits)


def class_level(class_label: str) -> ClassLevel:
    number = class_number(class_label)
    if 1 <= number <= 5:
        return ClassLevel.PRIMARY
    if 6 <= number <= 12:
        return ClassLevel.SECONDARY
    return ClassLevel.UNCLASSIFIED


def can_teach(designation: Designation, class_label: str) -> bool:
    """
    Designation rule for substitution:
    - PRT may only cover primary classes (1-5).
    - TGT and PGT may only cover secondary classes (6-12).
    - OTHER never qualifies, and unclassified labels match nobody.
    """
    level = class_level(class_label)
    if level is ClassLevel.PRIMARY:
        return designation == Designation.PRT
    if level is ClassLevel.SECONDARY:
        return designation in SECONDARY_DESIGNATIONS
    return False


def eligible_designations(class_label: str) -> list[Designation]:
    return [d for d in Designation if can_teach(d, class_label)]


def is_interchangeable_pair(first: Designation, second: Designation) -> bool:
    return first != second and {first, second} == SECONDARY_DESIGNATIONS


# --- 2. Calendar ---

def parse_date(value: Any) -> Optional[date]:
    """Accepts a date, datetime or ISO "YYYY-MM-DD" string. Anything else gives None."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.strptime(value.strip(), "%Y-%m-%d").date()
        except ValueError:
            return None
    return None


def weekday_index(target_date: date | str) -> Optional[int]:
    """Maps a date to a timetable day index, Monday=0 ... Saturday=5. Sundays and bad input give None."""
    parsed = parse_date(target_date)
    if parsed is None:
        return None
    index = parsed.weekday()
    return index if index < DAYS_PER_WEEK else None


# --- 3. Weekly Timetable Grid ---

def empty_timetable() -> list[list[str]]:
    return [["" for _ in range(PERIODS_PER_DAY)] for _ in range(DAYS_PER_WEEK)]


def _is_row_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def day_row(timetable: Any, day_index: int) -> Optional[Sequence[Optional[str]]]:
    """Returns the day's 8 cells, or None when the grid or that row is missing or malformed."""
    if not _is_row_sequence(timetable) or not 0 <= day_index < len(timetable):
        return None
    row = timetable[day_index]
    if not _is_row_sequence(row) or len(row) != PERIODS_PER_DAY:
        return None
    if any(cell is not None and not isinstance(cell, str) for cell in row):
        return None
    return row


def is_occupied(cell: Optional[str]) -> bool:
    return bool(cell and cell.strip())


def teaches_class(timetable: Any, class_label: str) -> bool:
    """True when the label appears anywhere in the weekly grid (any day, any period)."""
    if not _is_row_sequence(timetable):
        return False
    return any(
        _is_row_sequence(row) and any(cell == class_label for cell in row)
        for row in timetable
    )


def has_timetable(timetable: Any) -> bool:
    return _is_row_sequence(timetable) and len(timetable) > 0
