"""Diagnostics channel and decision trace for substitution runs."""

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

logger = logging.getLogger(__name__)

# --- Diagnostic codes ---
INVALID_DATE = "INVALID_DATE"
NON_WORKING_DAY = "NON_WORKING_DAY"
MISSING_TIMETABLE = "MISSING_TIMETABLE"
MISSING_DAY_ROW = "MISSING_DAY_ROW"


@dataclass(frozen=True)
class Diagnostic:
    code: str
    message: str
    teacher_id: Optional[str] = None


@dataclass
class DiagnosticsCollector:
    """Collects data-quality findings of a run. Nothing recorded here is ever raised."""

    _items: list[Diagnostic] = field(default_factory=list)

    def record(self, code: str, message: str, teacher_id: Optional[str] = None, level: int = logging.WARNING) -> Diagnostic:
        diagnostic = Diagnostic(code=code, message=message, teacher_id=teacher_id)
        self._items.append(diagnostic)
        logger.log(level, "%s: %s", code, message)
        return diagnostic

    def codes(self) -> list[str]:
        return [item.code for item in self._items]

    def as_list(self) -> list[Diagnostic]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)


@dataclass
class DecisionTraceCollector:
    """Records how every vacated period was decided: mode, ranked candidates and the pick."""

    _sequence: int = 0
    _items: list[dict[str, Any]] = field(default_factory=list)

    def record(
        self,
        *,
        absent_teacher_id: str,
        period: int,
        class_label: str,
        mode: str,
        ranked: list[tuple[str, int]],
        selected_teacher_id: Optional[str],
    ) -> None:
        self._sequence += 1
        self._items.append(
            {
                "decision_id": f"d-{self._sequence:06d}",
                "absent_teacher_id": absent_teacher_id,
                "period": period,
                "class_label": class_label,
                "mode": mode,
                "candidate_ids": [teacher_id for teacher_id, _ in ranked],
                "scores_by_teacher": {teacher_id: score for teacher_id, score in ranked},
                "selected_teacher_id": selected_teacher_id,
            }
        )

    def as_list(self) -> list[dict[str, Any]]:
        return list(self._items)
