from __future__ import annotations

from dataclasses import dataclass

from .model import GroupedStudents, RollRanges, Student


def _is_roll(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class StudentGroupFactory:
    """Factory Pattern: build student groups from roll number ranges."""

    def generate(self, roll_ranges: RollRanges) -> GroupedStudents:
        groups: GroupedStudents = {}
        for group_name, bounds in roll_ranges.items():
            # Malformed or reversed ranges are skipped, not reported.
            if isinstance(bounds, (str, bytes)) or len(bounds) != 2:
                continue
            start_id, end_id = bounds
            if not (_is_roll(start_id) and _is_roll(end_id)) or start_id > end_id:
                continue
            groups[group_name] = [
                Student(id=str(roll), name=str(roll)) for roll in range(start_id, end_id + 1)
            ]
        return groups
