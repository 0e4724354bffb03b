from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .core.constants import DEFAULT_CLASS_NAME
from .roster.factory import StudentGroupFactory
from .roster.service import RosterService
from .roster.store import RosterStore


@dataclass(frozen=True)
class Container:
    roster_store: RosterStore
    roster_service: RosterService


def build_container(*, seed_class_name: Optional[str] = DEFAULT_CLASS_NAME) -> Container:
    roster_store = RosterStore(
        seed_class_name=seed_class_name,
        group_factory=StudentGroupFactory(),
    )
    roster_service = RosterService(roster_store)

    return Container(
        roster_store=roster_store,
        roster_service=roster_service,
    )
