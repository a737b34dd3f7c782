from dataclasses import dataclass, field


@dataclass
class WorkloadLedger:
    """
    Periods assigned to each substitute within a single absent teacher's run.

    A fresh ledger is created for every absent teacher. Counts only ever go up.
    """

    _counts: dict[str, int] = field(default_factory=dict)

    def count(self, teacher_id: str) -> int:
        return self._counts.get(teacher_id, 0)

    def record_assignment(self, teacher_id: str) -> int:
        updated = self._counts.get(teacher_id, 0) + 1
        self._counts[teacher_id] = updated
        return updated

    def snapshot(self) -> dict[str, int]:
        return dict(self._counts)

    def __len__(self) -> int:
        return len(self._counts)
