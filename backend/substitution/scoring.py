"""
Candidate scoring.

Two mutually exclusive modes, chosen before any score is computed:
- INCUMBENT: some eligible teacher already teaches the vacated class somewhere in their
  week. Only those teachers are scored.
- FALLBACK: nobody eligible teaches the class. Every eligible teacher is scored and
  candidates with a non-positive score are dropped.
"""

from enum import Enum
from typing import List, Sequence, Tuple

from .models import Candidate, Teacher
from .timetable import is_interchangeable_pair, teaches_class
from .workload import WorkloadLedger

INCUMBENT_BONUS = 1000
SUBJECT_BONUS = 50
SAME_DESIGNATION_BONUS = 30
INTERCHANGEABLE_DESIGNATION_BONUS = 20
AVAILABILITY_BONUS = 10
WORKLOAD_PENALTY = 10


class ScoringMode(str, Enum):
    INCUMBENT = "INCUMBENT"
    FALLBACK = "FALLBACK"


def select_mode(eligible: Sequence[Teacher], class_label: str) -> Tuple[ScoringMode, List[Teacher]]:
    """Returns the scoring mode and the pool of teachers that mode scores."""
    incumbents = [t for t in eligible if teaches_class(t.timetable, class_label)]
    if incumbents:
        return ScoringMode.INCUMBENT, incumbents
    return ScoringMode.FALLBACK, list(eligible)


def _same_subject(candidate: Teacher, absent_teacher: Teacher) -> bool:
    if not candidate.subject or not absent_teacher.subject:
        return False
    return candidate.subject.lower() == absent_teacher.subject.lower()


def _build_reason(fragments: List[str], workload: int) -> str:
    reason = ", ".join(fragments)
    reason = reason[:1].upper() + reason[1:]
    if workload > 0:
        reason += f" [{workload + 1} periods today]"
    return reason


def score_incumbent(candidate: Teacher, absent_teacher: Teacher, workload: int) -> Candidate:
    score = INCUMBENT_BONUS
    fragments = ["already teaches this class"]

    if _same_subject(candidate, absent_teacher):
        score += SUBJECT_BONUS
        fragments.append(f"{candidate.subject} subject expert")

    score -= workload * WORKLOAD_PENALTY
    return Candidate(teacher=candidate, score=score, reason=_build_reason(fragments, workload))


def score_fallback(candidate: Teacher, absent_teacher: Teacher, workload: int) -> Candidate:
    score = 0
    fragments = ["covering for absent colleague"]

    if _same_subject(candidate, absent_teacher):
        score += SUBJECT_BONUS
        fragments.append(f"{candidate.subject} subject expert")

    if candidate.designation == absent_teacher.designation:
        score += SAME_DESIGNATION_BONUS
        fragments.append(f"same level ({candidate.designation.value})")
    elif is_interchangeable_pair(candidate.designation, absent_teacher.designation):
        score += INTERCHANGEABLE_DESIGNATION_BONUS
        fragments.append(f"qualified for this level ({candidate.designation.value})")

    score += AVAILABILITY_BONUS
    score -= workload * WORKLOAD_PENALTY
    return Candidate(teacher=candidate, score=score, reason=_build_reason(fragments, workload))


def rank_candidates(
    eligible: Sequence[Teacher],
    absent_teacher: Teacher,
    class_label: str,
    ledger: WorkloadLedger,
) -> Tuple[ScoringMode, List[Candidate]]:
    """
    Scores the eligible teachers for one vacated period and sorts them best first.
    The sort is stable, so equal scores keep roster order.
    """
    mode, pool = select_mode(eligible, class_label)

    if mode is ScoringMode.INCUMBENT:
        scored = [score_incumbent(t, absent_teacher, ledger.count(t.id)) for t in pool]
    else:
        scored = [score_fallback(t, absent_teacher, ledger.count(t.id)) for t in pool]
        scored = [c for c in scored if c.score > 0]

    scored.sort(key=lambda c: c.score, reverse=True)
    return mode, scored
