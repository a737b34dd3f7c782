import logging
from typing import Dict, List

from fastapi import APIRouter, Depends, HTTPException, status

from config import Settings, get_settings
import schemas
from substitution import Teacher, generate_batch
from substitution.timetable import WEEKDAY_NAMES, weekday_index
from utils import render_plan_summary

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/substitutions",
    tags=["Daily Operations"],
)


def build_roster(entries: List[schemas.TeacherIn]) -> Dict[str, Teacher]:
    """Converts the request roster to engine records, keyed by id in roster order."""
    roster: Dict[str, Teacher] = {}
    for entry in entries:
        if entry.id in roster:
            raise HTTPException(status_code=400, detail=f"Duplicate teacher id '{entry.id}' in roster.")
        roster[entry.id] = entry.to_domain()
    return roster


# --- Full-Day Absence Planning Endpoint ---

@router.post("/generate", response_model=schemas.PlanResponse, status_code=status.HTTP_200_OK)
def generate_plan(
    data: schemas.PlanRequest,
    settings: Settings = Depends(get_settings),
):
    """
    Generates substitutions for every teacher marked absent on `target_date`.
    Each absent teacher gets one plan; nothing is stored.
    """
    roster = build_roster(data.roster)

    # Keep request order, ignore repeated ids
    absent_ids = list(dict.fromkeys(data.absent_teacher_ids))
    missing = [teacher_id for teacher_id in absent_ids if teacher_id not in roster]
    if missing:
        raise HTTPException(
            status_code=404,
            detail=f"Absent teacher(s) not found in roster: {', '.join(missing)}.",
        )

    include_trace = data.include_trace if data.include_trace is not None else settings.include_trace_by_default
    logger.info("Generating substitutions for %s on %s", ", ".join(absent_ids), data.target_date)

    plans = generate_batch(
        absent_teachers=[roster[teacher_id] for teacher_id in absent_ids],
        target_date=data.target_date,
        roster=roster.values(),
        absent_teacher_ids=set(absent_ids),
        max_workers=settings.plan_max_workers,
        include_trace=include_trace,
    )

    plan_results = []
    for plan in plans:
        plan_results.append(
            schemas.TeacherPlan(
                absent_teacher_id=plan.absent_teacher_id,
                absent_teacher_name=plan.absent_teacher_name,
                decisions=[schemas.SubstitutionDecision.model_validate(d) for d in plan.decisions],
                diagnostics=[schemas.Diagnostic.model_validate(d) for d in plan.diagnostics],
                summary=render_plan_summary(plan.decisions, plan.absent_teacher_name),
                trace=plan.trace if include_trace else None,
            )
        )

    total_periods = sum(len(p.decisions) for p in plans)
    assigned = sum(len(p.assigned) for p in plans)
    day_index = weekday_index(data.target_date)

    return schemas.PlanResponse(
        target_date=data.target_date,
        weekday=WEEKDAY_NAMES[day_index] if day_index is not None else None,
        plans=plan_results,
        total_periods=total_periods,
        assigned=assigned,
        unfilled=total_periods - assigned,
    )
