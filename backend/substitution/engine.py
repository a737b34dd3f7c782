"""
Substitution assignment engine.

For one absent teacher and one date, every period the teacher was due to teach becomes a
vacated period. Each is either given to the best ranked candidate or marked unfilled.
Periods are processed 1 -> 8 and a per-teacher workload ledger spreads the cover.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import date
from typing import AbstractSet, Iterable, List, Optional, Sequence

from . import diagnostics as codes
from .diagnostics import DecisionTraceCollector, DiagnosticsCollector
from .eligibility import find_eligible_substitutes
from .models import SubstitutionDecision, Teacher, TeacherPlan, VacatedPeriod
from .scoring import rank_candidates
from .timetable import WEEKDAY_NAMES, day_row, has_timetable, is_occupied, parse_date, weekday_index
from .workload import WorkloadLedger

logger = logging.getLogger(__name__)


def find_vacated_periods(absent_teacher: Teacher, day_index: int) -> Optional[List[VacatedPeriod]]:
    """Returns the day's taught periods in order, or None when the row is unusable."""
    row = day_row(absent_teacher.timetable, day_index)
    if row is None:
        return None
    return [
        VacatedPeriod(period=index + 1, class_label=cell.strip())
        for index, cell in enumerate(row)
        if is_occupied(cell)
    ]


def _resolve_day(
    absent_teacher: Teacher,
    target_date: date | str,
    diagnostics: DiagnosticsCollector,
) -> Optional[int]:
    parsed = parse_date(target_date)
    if parsed is None:
        diagnostics.record(
            codes.INVALID_DATE,
            f"Date {target_date!r} could not be read; no substitutions generated",
            absent_teacher.id,
            level=logging.DEBUG,
        )
        return None

    day_index = weekday_index(parsed)
    if day_index is None:
        diagnostics.record(
            codes.NON_WORKING_DAY,
            f"{parsed.isoformat()} is not a school day; no substitutions generated",
            absent_teacher.id,
            level=logging.DEBUG,
        )
    return day_index


def generate_substitutions(
    absent_teacher: Teacher,
    target_date: date | str,
    roster: Sequence[Teacher],
    absent_teacher_ids: AbstractSet[str],
    ledger: Optional[WorkloadLedger] = None,
    diagnostics: Optional[DiagnosticsCollector] = None,
    trace: Optional[DecisionTraceCollector] = None,
) -> List[SubstitutionDecision]:
    """
    Decides cover for every period `absent_teacher` leaves empty on `target_date`.

    Returns one decision per vacated period in period order. An empty list means there was
    nothing to cover: a Sunday, an unreadable date, a missing timetable or a free day.
    Data problems go to `diagnostics`; nothing is raised for them.
    """
    ledger = ledger if ledger is not None else WorkloadLedger()
    diagnostics = diagnostics if diagnostics is not None else DiagnosticsCollector()

    day_index = _resolve_day(absent_teacher, target_date, diagnostics)
    if day_index is None:
        return []

    vacated_periods = find_vacated_periods(absent_teacher, day_index)
    if vacated_periods is None:
        if not has_timetable(absent_teacher.timetable):
            diagnostics.record(
                codes.MISSING_TIMETABLE,
                f"Teacher {absent_teacher.name} has no timetable data",
                absent_teacher.id,
            )
        else:
            diagnostics.record(
                codes.MISSING_DAY_ROW,
                f"Teacher {absent_teacher.name} has no timetable for day index {day_index}",
                absent_teacher.id,
            )
        return []

    if not vacated_periods:
        return []

    decisions: List[SubstitutionDecision] = []

    for vacated in vacated_periods:
        eligible = find_eligible_substitutes(
            roster=roster,
            absent_teacher=absent_teacher,
            absent_teacher_ids=absent_teacher_ids,
            day_index=day_index,
            period=vacated.period,
            class_label=vacated.class_label,
        )
        mode, ranked = rank_candidates(eligible, absent_teacher, vacated.class_label, ledger)

        if not ranked:
            decision = SubstitutionDecision.unfilled(vacated)
        else:
            best = ranked[0]
            ledger.record_assignment(best.teacher.id)
            decision = SubstitutionDecision.assigned(vacated, best)
            logger.debug(
                "Period %d (%s): %s selected in %s mode with score %d",
                vacated.period, vacated.class_label, best.teacher.id, mode.value, best.score,
            )

        if trace is not None:
            trace.record(
                absent_teacher_id=absent_teacher.id,
                period=vacated.period,
                class_label=vacated.class_label,
                mode=mode.value,
                ranked=[(c.teacher.id, c.score) for c in ranked],
                selected_teacher_id=decision.substitute_id or None,
            )
        decisions.append(decision)

    return decisions


def plan_for_teacher(
    absent_teacher: Teacher,
    target_date: date | str,
    roster: Sequence[Teacher],
    absent_teacher_ids: AbstractSet[str],
    include_trace: bool = False,
) -> TeacherPlan:
    """Runs the engine for one absent teacher with a fresh ledger and collectors."""
    diagnostics = DiagnosticsCollector()
    trace = DecisionTraceCollector() if include_trace else None
    decisions = generate_substitutions(
        absent_teacher,
        target_date,
        roster,
        absent_teacher_ids,
        ledger=WorkloadLedger(),
        diagnostics=diagnostics,
        trace=trace,
    )
    day_index = weekday_index(target_date)
    return TeacherPlan(
        absent_teacher_id=absent_teacher.id,
        absent_teacher_name=absent_teacher.name,
        target_date=target_date,
        weekday=WEEKDAY_NAMES[day_index] if day_index is not None else None,
        decisions=decisions,
        diagnostics=diagnostics.as_list(),
        trace=trace.as_list() if trace is not None else [],
    )


def generate_batch(
    absent_teachers: Sequence[Teacher],
    target_date: date | str,
    roster: Iterable[Teacher],
    absent_teacher_ids: Optional[AbstractSet[str]] = None,
    max_workers: int = 1,
    include_trace: bool = False,
) -> List[TeacherPlan]:
    """
    Plans cover for several absent teachers on the same date.

    Every absent teacher gets an independent workload ledger; the roster is shared read-only.
    With max_workers > 1 the teachers are planned on a thread pool. Output order always
    follows `absent_teachers`.
    """
    if max_workers < 1:
        raise ValueError(f"max_workers must be at least 1, got {max_workers}")

    roster_snapshot = tuple(roster)
    excluded = frozenset(absent_teacher_ids or ()) | {t.id for t in absent_teachers}

    def _plan(teacher: Teacher) -> TeacherPlan:
        return plan_for_teacher(teacher, target_date, roster_snapshot, excluded, include_trace=include_trace)

    if max_workers == 1 or len(absent_teachers) <= 1:
        plans = [_plan(t) for t in absent_teachers]
    else:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            plans = list(pool.map(_plan, absent_teachers))

    total = sum(len(p.decisions) for p in plans)
    assigned = sum(len(p.assigned) for p in plans)
    logger.info(
        "Planned %d absent teacher(s) for %s: %d periods, %d assigned, %d unfilled",
        len(plans), target_date, total, assigned, total - assigned,
    )
    return plans
