from __future__ import annotations

import pytest

from src.roster_system.roster_system.core.exceptions import ValidationError
from src.roster_system.roster_system.roster.service import RosterService, groups_from_payload
from src.roster_system.roster_system.roster.store import RosterStore


def test_add_class_from_form_parses_and_activates(service, store):
    name = service.add_class_from_form(
        "  M-Tech 101 ",
        [(" Group A ", " 1 ", "5"), ("Group B", "10", "11")],
    )

    assert name == "M-Tech 101"
    assert store.active_class_name == "M-Tech 101"
    assert list(store.active_grouped_students) == ["Group A", "Group B"]
    assert store.total_students == 7


@pytest.mark.parametrize("class_name", ["", "   ", None])
def test_blank_class_name_is_rejected(service, store, class_name):
    with pytest.raises(ValidationError):
        service.add_class_from_form(class_name, [("Group A", "1", "2")])

    assert len(store.class_names) == 1


def test_non_numeric_roll_is_rejected(service, store, changes):
    with pytest.raises(ValidationError, match="must be a number"):
        service.add_class_from_form("X", [("Group A", "1", "ten")])

    assert "X" not in store.class_names
    assert changes == []


def test_missing_group_name_is_rejected(service):
    with pytest.raises(ValidationError, match="Group 2 name"):
        service.add_class_from_form("X", [("Group A", "1", "2"), ("", "3", "4")])


def test_reversed_range_passes_form_but_is_dropped(service, store):
    service.add_class_from_form("X", [("Group A", "9", "1"), ("Group B", "1", "2")])

    assert store.active_class_name == "X"
    assert list(store.active_grouped_students) == ["Group B"]


def test_group_tiles_report_counts(service):
    service.add_class_from_form("X", [("Group A", "1", "2"), ("Group B", "3", "3")])
    service.toggle("3", True)

    tiles = service.get_group_tiles()

    assert [t["group_name"] for t in tiles] == ["Group A", "Group B"]
    assert (tiles[0]["present"], tiles[0]["total"], tiles[0]["complete"]) == (0, 2, False)
    assert (tiles[1]["present"], tiles[1]["total"], tiles[1]["complete"]) == (1, 1, True)
    assert tiles[1]["students"] == [{"id": "3", "name": "3", "is_present": True}]


def test_summary_tracks_mark_all(service):
    service.mark_all(True)
    summary = service.get_summary()

    assert summary == {"class_name": "Main Batch 2024", "total": 71, "present": 71, "absent": 0}


def test_summary_without_active_class():
    svc = RosterService(RosterStore(seed_class_name=None))

    assert svc.get_summary() == {"class_name": "Class", "total": 0, "present": 0, "absent": 0}
    assert svc.get_state()["groups"] == []


def test_select_class_switches_and_ignores_unknown(service, store):
    service.add_class_from_form("X", [("Group A", "1", "2")])

    service.select_class("Main Batch 2024")
    assert store.active_class_name == "Main Batch 2024"

    service.select_class("missing")
    assert store.active_class_name == "Main Batch 2024"


def test_state_lists_classes_in_insertion_order(service):
    service.add_class_from_form("B", [("G", "1", "1")])
    service.add_class_from_form("A", [("G", "1", "1")])

    state = service.get_state()

    assert state["class_names"] == ["Main Batch 2024", "B", "A"]
    assert state["active_class_name"] == "A"


def test_groups_from_payload_accepts_ints_and_strings():
    forms = groups_from_payload([{"name": "A", "start": 1, "end": "3"}, {"name": "B"}])

    assert forms == [("A", "1", "3"), ("B", None, None)]


def test_groups_from_payload_rejects_non_objects():
    with pytest.raises(ValidationError):
        groups_from_payload(["A"])


@pytest.mark.parametrize("groups", [5, "Group A", {"name": "A"}])
def test_groups_from_payload_rejects_non_list(groups):
    with pytest.raises(ValidationError, match="groups must be a list"):
        groups_from_payload(groups)


def test_groups_from_payload_rejects_non_text_name():
    with pytest.raises(ValidationError, match="Group name must be text"):
        groups_from_payload([{"name": 7, "start": 1, "end": 2}])


def test_underscored_roll_number_is_rejected(service, store):
    with pytest.raises(ValidationError, match="must be a number"):
        service.add_class_from_form("U", [("G", "1_0", "1_2")])

    assert "U" not in store.class_names
