from typing import List, Sequence

from substitution import SubstitutionDecision


def render_plan_summary(
    decisions: Sequence[SubstitutionDecision],
    absent_teacher_name: str
) -> str:
    """
    Builds the plain-text plan summary shown to the admin for one absent teacher.
    Unfilled periods are listed like the others but not counted as substitutes.
    """
    if not decisions:
        return f"{absent_teacher_name} has no classes scheduled for this day."

    lines: List[str] = [f"Substitution Plan for {absent_teacher_name}:", ""]

    for decision in decisions:
        lines.append(
            f"Period {decision.period} ({decision.class_label}): "
            f"{decision.substitute_name} - {decision.reason}"
        )

    unique_substitutes = {d.substitute_name for d in decisions if d.substitute_id}

    lines.append("")
    lines.append(f"Total periods: {len(decisions)}")
    lines.append(f"Substitutes assigned: {len(unique_substitutes)}")

    return "\n".join(lines)
