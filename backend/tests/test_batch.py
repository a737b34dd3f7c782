import pytest

from substitution import Designation, generate_batch
from substitution import diagnostics as codes

from conftest import MONDAY, SUNDAY, build_teacher, row


def _staffroom():
    asha = build_teacher("asha", Designation.TGT, "Science", {0: row("7A", "7A")})
    ravi = build_teacher("ravi", Designation.TGT, "Science", {0: row("8B", "", "8B")})
    esha = build_teacher("esha", Designation.TGT, "English")
    farid = build_teacher("farid", Designation.PGT, "Science")
    return [asha, ravi, esha, farid]


def test_each_absentee_gets_an_independent_ledger() -> None:
    roster = _staffroom()
    asha, ravi = roster[0], roster[1]

    plans = generate_batch([asha, ravi], MONDAY, roster)

    assert [p.absent_teacher_id for p in plans] == ["asha", "ravi"]
    assert [d.substitute_id for d in plans[0].decisions] == ["farid", "farid"]
    assert [d.substitute_id for d in plans[1].decisions] == ["farid", "farid"]
    # farid carries two periods for asha, yet starts at zero for ravi
    assert plans[1].decisions[0].reason == (
        "Covering for absent colleague, Science subject expert, qualified for this level (PGT)"
    )
    assert plans[1].decisions[1].reason.endswith("[2 periods today]")
    assert plans[0].weekday == "Monday"


def test_absentees_never_cover_each_other() -> None:
    roster = _staffroom()
    asha, ravi = roster[0], roster[1]

    plans = generate_batch([asha, ravi], MONDAY, roster)

    substitutes = {d.substitute_id for p in plans for d in p.decisions}
    assert substitutes.isdisjoint({"asha", "ravi"})


def test_extra_absent_ids_are_excluded() -> None:
    roster = _staffroom()

    plans = generate_batch([roster[0]], MONDAY, roster, absent_teacher_ids={"esha"})

    assert [d.substitute_id for d in plans[0].decisions] == ["farid", "ravi"]


def test_parallel_run_matches_sequential_run() -> None:
    roster = _staffroom() + [
        build_teacher(f"sub{i}", Designation.TGT, "Art", {0: row(*([""] * i + ["9A"]))})
        for i in range(6)
    ]
    absentees = roster[:2]

    sequential = generate_batch(absentees, MONDAY, roster, max_workers=1, include_trace=True)
    parallel = generate_batch(absentees, MONDAY, roster, max_workers=4, include_trace=True)

    assert [p.decisions for p in parallel] == [p.decisions for p in sequential]
    assert [p.trace for p in parallel] == [p.trace for p in sequential]


def test_sunday_batch_returns_empty_plans_with_diagnostics() -> None:
    roster = _staffroom()

    plans = generate_batch(roster[:2], SUNDAY, roster)

    assert all(p.decisions == [] for p in plans)
    assert all(p.weekday is None for p in plans)
    assert [p.diagnostics[0].code for p in plans] == [codes.NON_WORKING_DAY] * 2


def test_plan_helpers_split_assigned_and_unfilled() -> None:
    absent = build_teacher("meera", Designation.PRT, "EVS", {0: row("1A", "2A")})
    lata = build_teacher("lata", Designation.PRT, "Hindi", {0: row("", "4C")})

    plan = generate_batch([absent], MONDAY, [absent, lata])[0]

    assert [d.period for d in plan.assigned] == [1]
    assert [d.period for d in plan.unfilled] == [2]
    assert plan.substitutes == {"Lata"}


def test_rejects_non_positive_worker_count() -> None:
    with pytest.raises(ValueError):
        generate_batch([], MONDAY, [], max_workers=0)
