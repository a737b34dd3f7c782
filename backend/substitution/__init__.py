"""Substitute assignment engine."""

from .diagnostics import DecisionTraceCollector, Diagnostic, DiagnosticsCollector
from .engine import find_vacated_periods, generate_batch, generate_substitutions, plan_for_teacher
from .models import (
    NO_SUBSTITUTE_NAME,
    NO_SUBSTITUTE_REASON,
    Candidate,
    SubstitutionDecision,
    Teacher,
    TeacherPlan,
    VacatedPeriod,
)
from .scoring import ScoringMode, rank_candidates
from .timetable import ClassLevel, Designation, can_teach, class_level
from .workload import WorkloadLedger

__all__ = [
    "NO_SUBSTITUTE_NAME",
    "NO_SUBSTITUTE_REASON",
    "Candidate",
    "ClassLevel",
    "DecisionTraceCollector",
    "Designation",
    "Diagnostic",
    "DiagnosticsCollector",
    "ScoringMode",
    "SubstitutionDecision",
    "Teacher",
    "TeacherPlan",
    "VacatedPeriod",
    "WorkloadLedger",
    "can_teach",
    "class_level",
    "find_vacated_periods",
    "generate_batch",
    "generate_substitutions",
    "plan_for_teacher",
    "rank_candidates",
]
