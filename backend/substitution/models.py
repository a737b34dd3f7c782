# Engine domain records. The engine reads these and never writes them back.

from dataclasses import dataclass, field
from datetime import date
from typing import Any, List, Optional

from .diagnostics import Diagnostic
from .timetable import Designation, empty_timetable

NO_SUBSTITUTE_NAME = "No substitute available"
NO_SUBSTITUTE_REASON = "All eligible teachers are occupied or absent"


# --- 1. Teacher ---
@dataclass(frozen=True)
class Teacher:
    """
    A roster entry. `timetable` is a 6x8 grid (Monday..Saturday x periods 1..8) where each
    cell is a class label or empty. Grids arriving from outside may be malformed; the
    engine checks them before use instead of trusting this shape.
    """
    id: str
    name: str
    designation: Designation
    subject: Optional[str] = None
    timetable: Any = field(default_factory=empty_timetable)

    def __post_init__(self) -> None:
        object.__setattr__(self, "designation", Designation(self.designation))


# --- 2. Vacated Period ---
@dataclass(frozen=True)
class VacatedPeriod:
    period: int         # 1..8
    class_label: str


# --- 3. Candidate (transient, produced by the scorer) ---
@dataclass(frozen=True)
class Candidate:
    teacher: Teacher
    score: int
    reason: str


# --- 4. Substitution Decision ---
@dataclass(frozen=True)
class SubstitutionDecision:
    """One decision per vacated period. An empty substitute_id marks an unfilled period."""
    period: int
    class_label: str
    substitute_id: str
    substitute_name: str
    reason: str

    @property
    def is_assigned(self) -> bool:
        return bool(self.substitute_id)

    @classmethod
    def unfilled(cls, vacated: VacatedPeriod) -> "SubstitutionDecision":
        return cls(
            period=vacated.period,
            class_label=vacated.class_label,
            substitute_id="",
            substitute_name=NO_SUBSTITUTE_NAME,
            reason=NO_SUBSTITUTE_REASON,
        )

    @classmethod
    def assigned(cls, vacated: VacatedPeriod, candidate: Candidate) -> "SubstitutionDecision":
        return cls(
            period=vacated.period,
            class_label=vacated.class_label,
            substitute_id=candidate.teacher.id,
            substitute_name=candidate.teacher.name,
            reason=candidate.reason,
        )


# --- 5. Per-teacher plan (engine output plus its diagnostics) ---
@dataclass
class TeacherPlan:
    absent_teacher_id: str
    absent_teacher_name: str
    target_date: date | str
    weekday: Optional[str]
    decisions: List[SubstitutionDecision] = field(default_factory=list)
    diagnostics: List[Diagnostic] = field(default_factory=list)
    trace: List[dict[str, Any]] = field(default_factory=list)

    @property
    def assigned(self) -> List[SubstitutionDecision]:
        return [d for d in self.decisions if d.is_assigned]

    @property
    def unfilled(self) -> List[SubstitutionDecision]:
        return [d for d in self.decisions if not d.is_assigned]

    @property
    def substitutes(self) -> set[str]:
        return {d.substitute_name for d in self.assigned}
