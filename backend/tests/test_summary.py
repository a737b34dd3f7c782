from substitution import NO_SUBSTITUTE_NAME, NO_SUBSTITUTE_REASON, SubstitutionDecision
from utils import render_plan_summary


def test_summary_for_teacher_without_classes() -> None:
    assert render_plan_summary([], "Asha") == "Asha has no classes scheduled for this day."


def test_summary_lists_periods_and_counts_distinct_substitutes() -> None:
    decisions = [
        SubstitutionDecision(1, "10A", "bala", "Bala", "Already teaches this class"),
        SubstitutionDecision(2, "10A", "bala", "Bala", "Already teaches this class [2 periods today]"),
        SubstitutionDecision(4, "9C", "", NO_SUBSTITUTE_NAME, NO_SUBSTITUTE_REASON),
    ]

    summary = render_plan_summary(decisions, "Asha")

    assert summary.splitlines() == [
        "Substitution Plan for Asha:",
        "",
        "Period 1 (10A): Bala - Already teaches this class",
        "Period 2 (10A): Bala - Already teaches this class [2 periods today]",
        "Period 4 (9C): No substitute available - All eligible teachers are occupied or absent",
        "",
        "Total periods: 3",
        "Substitutes assigned: 1",
    ]
