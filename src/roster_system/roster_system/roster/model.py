from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, List, Mapping, Sequence

# Group name -> [start_roll, end_roll]
RollRanges = Mapping[str, Sequence[int]]


@dataclass(frozen=True)
class Student:
    """Domain entity: one student row of a group.

    Note: values are immutable; attendance changes produce a new Student.
    """

    id: str
    name: str
    is_present: bool = False

    def with_presence(self, present: bool) -> "Student":
        return replace(self, is_present=bool(present))


# Group name -> ordered students (ascending roll number)
GroupedStudents = Dict[str, List[Student]]
