import pytest
from fastapi.testclient import TestClient

from config import Settings, get_settings
from main import app
from substitution import Designation, Teacher
from substitution.timetable import empty_timetable

MONDAY = "2026-10-19"
TUESDAY = "2026-10-20"
SATURDAY = "2026-10-24"
SUNDAY = "2026-10-18"


def build_teacher(
    teacher_id: str,
    designation: Designation,
    subject: str | None = None,
    days: dict[int, list[str]] | None = None,
    name: str | None = None,
) -> Teacher:
    """Teacher with a free week except for the given day rows (day index -> 8 cells)."""
    timetable = empty_timetable()
    for day_index, row in (days or {}).items():
        timetable[day_index] = list(row)
    return Teacher(
        id=teacher_id,
        name=name or teacher_id.capitalize(),
        designation=designation,
        subject=subject,
        timetable=timetable,
    )


def row(*cells: str) -> list[str]:
    """Pads the given leading periods to a full 8-period day."""
    return list(cells) + [""] * (8 - len(cells))


@pytest.fixture()
def make_teacher():
    return build_teacher


@pytest.fixture()
def client():
    def override_settings():
        return Settings(plan_max_workers=2, include_trace_by_default=False)

    app.dependency_overrides[get_settings] = override_settings

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
