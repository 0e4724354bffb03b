from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional

from ..core.constants import DEFAULT_CLASS_GROUPS, DEFAULT_CLASS_NAME
from .factory import StudentGroupFactory
from .model import GroupedStudents, RollRanges, Student

logger = logging.getLogger(__name__)

Observer = Callable[["RosterStore"], None]


class RosterStore:
    """Single owner of every class roster and the active-class pointer.

    All attendance changes go through this object. After each mutation that
    changes observable state, registered observers are called synchronously
    with the store as their only argument.
    """

    def __init__(
        self,
        *,
        seed_class_name: Optional[str] = DEFAULT_CLASS_NAME,
        seed_groups: Optional[RollRanges] = None,
        group_factory: StudentGroupFactory | None = None,
    ):
        self._factory = group_factory or StudentGroupFactory()
        self._classes: Dict[str, GroupedStudents] = {}
        self._active_class_name: Optional[str] = None
        self._observers: List[Observer] = []

        if seed_class_name is not None:
            groups = DEFAULT_CLASS_GROUPS if seed_groups is None else seed_groups
            self._classes[seed_class_name] = self.generate_groups(groups)
            self._active_class_name = seed_class_name

    # --- observers -------------------------------------------------------

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register `observer`; returns a callable that unregisters it."""
        self._observers.append(observer)
        return lambda: self.unsubscribe(observer)

    def unsubscribe(self, observer: Observer) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def _notify(self) -> None:
        for observer in list(self._observers):
            try:
                observer(self)
            except Exception:
                logger.exception("Roster observer %r failed", observer)

    # --- queries ---------------------------------------------------------

    @property
    def active_class_name(self) -> Optional[str]:
        return self._active_class_name

    @property
    def active_grouped_students(self) -> GroupedStudents:
        if self._active_class_name is not None and self._active_class_name in self._classes:
            return self._classes[self._active_class_name]
        return {}

    @property
    def class_names(self) -> List[str]:
        return list(self._classes.keys())

    @property
    def all_active_students(self) -> List[Student]:
        return [s for students in self.active_grouped_students.values() for s in students]

    @property
    def total_students(self) -> int:
        return len(self.all_active_students)

    @property
    def present_count(self) -> int:
        return sum(1 for s in self.all_active_students if s.is_present)

    @property
    def absent_count(self) -> int:
        return self.total_students - self.present_count

    # --- mutations -------------------------------------------------------

    def generate_groups(self, roll_ranges: RollRanges) -> GroupedStudents:
        return self._factory.generate(roll_ranges)

    def add_class(self, name: str, roll_ranges: RollRanges) -> None:
        """Store (or replace) a class roster and make it the active class."""
        groups = self.generate_groups(roll_ranges)
        if name in self._classes:
            logger.debug("Replacing roster for class %r", name)
        self._classes[name] = groups
        self._active_class_name = name
        logger.debug("Class %r loaded with %d group(s)", name, len(groups))
        self._notify()

    def set_active(self, name: str) -> None:
        if name not in self._classes:
            logger.debug("Ignoring switch to unknown class %r", name)
            return
        self._active_class_name = name
        self._notify()

    def toggle_attendance(self, student_id: str, present: bool) -> None:
        groups = self.active_grouped_students
        for group_name, students in groups.items():
            index = next((i for i, s in enumerate(students) if s.id == student_id), -1)
            if index != -1:
                students[index] = students[index].with_presence(present)
                logger.debug("Student %s in %r marked present=%s", student_id, group_name, bool(present))
                self._notify()
                return
        logger.debug("Student %s not found in active class", student_id)

    def mark_all(self, present: bool) -> None:
        groups = self.active_grouped_students
        for group_name, students in groups.items():
            groups[group_name] = [s.with_presence(present) for s in students]
        logger.debug("Marked all students in %r present=%s", self._active_class_name, bool(present))
        self._notify()
