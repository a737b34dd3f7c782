from fastapi import APIRouter

import schemas
from substitution.timetable import class_level, eligible_designations

router = APIRouter(
    prefix="/timetable",
    tags=["Timetable Management"],
)


@router.get("/classify/{class_label}", response_model=schemas.ClassClassification)
def classify_class(class_label: str):
    """Reports a class label's level and which designations may cover it."""
    label = class_label.strip()
    return schemas.ClassClassification(
        class_label=label,
        level=class_level(label),
        eligible_designations=eligible_designations(label),
    )
