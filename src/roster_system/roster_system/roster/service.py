from __future__ import annotations

from typing import Iterable, Optional, Sequence, Tuple

from ..common.validators import require_int, require_non_empty
from ..core.constants import FALLBACK_CLASS_LABEL
from ..core.exceptions import ValidationError
from .store import RosterStore

# (group name, start roll text, end roll text) as typed into the roster form
GroupForm = Tuple[Optional[str], Optional[str], Optional[str]]


class RosterService:
    """View-facing operations over a RosterStore.

    Controllers stay thin: form validation and read models for the UI live
    here, the attendance state itself lives in the store.
    """

    def __init__(self, store: RosterStore):
        self._store = store

    def add_class_from_form(self, class_name: Optional[str], groups: Iterable[GroupForm]) -> str:
        name = require_non_empty(class_name, "Class name")

        roll_ranges: dict[str, list[int]] = {}
        for position, (group_name, start_text, end_text) in enumerate(groups, start=1):
            label = f"Group {position}"
            group = require_non_empty(group_name, f"{label} name")
            start = require_int(start_text, f"{label} start roll no.")
            end = require_int(end_text, f"{label} end roll no.")
            roll_ranges[group] = [start, end]

        self._store.add_class(name, roll_ranges)
        return name

    def select_class(self, class_name: str) -> None:
        self._store.set_active(class_name)

    def toggle(self, student_id: str, present: bool) -> None:
        self._store.toggle_attendance(str(student_id), bool(present))

    def mark_all(self, present: bool) -> None:
        self._store.mark_all(bool(present))

    def get_group_tiles(self) -> list[dict]:
        tiles = []
        for group_name, students in self._store.active_grouped_students.items():
            present = sum(1 for s in students if s.is_present)
            tiles.append(
                {
                    "group_name": group_name,
                    "present": present,
                    "total": len(students),
                    "complete": present == len(students),
                    "students": [self._student_to_ui(s) for s in students],
                }
            )
        return tiles

    def get_summary(self) -> dict:
        return {
            "class_name": self._store.active_class_name or FALLBACK_CLASS_LABEL,
            "total": self._store.total_students,
            "present": self._store.present_count,
            "absent": self._store.absent_count,
        }

    def get_state(self) -> dict:
        return {
            "class_names": self._store.class_names,
            "active_class_name": self._store.active_class_name,
            "groups": self.get_group_tiles(),
            "summary": self.get_summary(),
        }

    def _student_to_ui(self, s) -> dict:
        return {"id": s.id, "name": s.name, "is_present": s.is_present}


def groups_from_payload(items: Sequence[dict] | None) -> list[GroupForm]:
    """Read `[{name, start, end}, ...]` from a JSON body into form tuples."""
    if items is None:
        return []
    if not isinstance(items, list):
        raise ValidationError("groups must be a list")
    forms: list[GroupForm] = []
    for item in items:
        if not isinstance(item, dict):
            raise ValidationError("Invalid group definition")
        if not isinstance(item.get("name"), (str, type(None))):
            raise ValidationError("Group name must be text")
        forms.append((item.get("name"), _as_text(item.get("start")), _as_text(item.get("end"))))
    return forms


def _as_text(value) -> Optional[str]:
    return None if value is None else str(value)
