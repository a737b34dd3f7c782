from pydantic import BaseModel, Field
from datetime import date
from typing import Any, Dict, List, Optional

from substitution import ClassLevel, Designation, Teacher

# --- 1. Teacher Schemas ---

class TeacherIn(BaseModel):
    """A roster entry as sent by the caller. The timetable may be incomplete; the engine copes with it."""
    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    designation: Designation
    subject: Optional[str] = None
    # 6 day rows (Monday..Saturday) x 8 periods; empty string or null means a free period.
    # Rows and cells are checked by the engine, which skips a teacher whose day row is malformed.
    timetable: Optional[List[Any]] = None

    def to_domain(self) -> Teacher:
        return Teacher(
            id=self.id,
            name=self.name,
            designation=self.designation,
            subject=self.subject,
            timetable=self.timetable,
        )

# --- 2. Planning Input ---

class PlanRequest(BaseModel):
    """Full-day absence planning input for one date."""
    target_date: date
    roster: List[TeacherIn]
    absent_teacher_ids: List[str] = Field(..., min_length=1)
    include_trace: Optional[bool] = None

# --- 3. Planning Output ---

class SubstitutionDecision(BaseModel):
    """One row of the plan. An empty substitute_id means no one could be assigned."""
    period: int
    class_label: str
    substitute_id: str
    substitute_name: str
    reason: str

    model_config = {
        "from_attributes": True
    }

class Diagnostic(BaseModel):
    code: str
    message: str
    teacher_id: Optional[str] = None

    model_config = {
        "from_attributes": True
    }

class TeacherPlan(BaseModel):
    absent_teacher_id: str
    absent_teacher_name: str
    decisions: List[SubstitutionDecision]
    diagnostics: List[Diagnostic]
    summary: str
    trace: Optional[List[Dict[str, Any]]] = None

class PlanResponse(BaseModel):
    target_date: date
    weekday: Optional[str]
    plans: List[TeacherPlan]
    total_periods: int
    assigned: int
    unfilled: int

# --- 4. Timetable Lookups ---

class ClassClassification(BaseModel):
    class_label: str
    level: ClassLevel
    eligible_designations: List[Designation]
