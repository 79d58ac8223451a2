from dataclasses import replace
from datetime import date

import pytest

import store
import utils
from models import AppState, Member, NotFoundError, Session, Task


def _task(task_id="x1", status="todo"):
    return Task(task_id, "Book venue", "", status, None, date(2023, 11, 1), "medium")


def test_add_then_delete_restores_snapshot():
    s = utils.initial_data()
    t = _task()

    added = store.add_task(s, t)
    assert added.tasks[-1] == t
    assert len(added.tasks) == len(s.tasks) + 1

    assert store.delete_task(added, t.id) == s


def test_add_does_not_mutate_input():
    s = utils.initial_data()
    before = s.tasks
    store.add_task(s, _task())
    assert s.tasks is before
    assert len(s.tasks) == 4


def test_update_replaces_in_place():
    s = utils.initial_data()
    t3 = s.tasks[2]
    out = store.update_task(s, replace(t3, status="done", title="Update site"))

    assert [t.id for t in out.tasks] == ["t1", "t2", "t3", "t4"]
    assert out.tasks[2].status == "done"
    assert out.tasks[2].title == "Update site"
    assert out.members is s.members
    assert out.attendance is s.attendance


def test_update_unknown_id_is_noop():
    s = utils.initial_data()
    out = store.update_task(s, _task("nope"))
    assert out is s
    assert out.tasks is s.tasks


def test_update_unknown_id_strict_raises():
    s = utils.initial_data()
    with pytest.raises(NotFoundError):
        store.update_task(s, _task("nope"), strict=True)


def test_delete_unknown_id():
    s = utils.initial_data()
    assert store.delete_task(s, "nope") is s
    with pytest.raises(NotFoundError):
        store.delete_task(s, "nope", strict=True)


def test_delete_does_not_cascade():
    s = utils.initial_data()
    out = store.delete_task(s, "t1")
    assert [t.id for t in out.tasks] == ["t2", "t3", "t4"]
    assert out.members is s.members
    assert out.sessions is s.sessions
    assert out.attendance is s.attendance


def test_move_task_forward_and_backward():
    s = AppState(tasks=(_task(),))
    s = store.move_task(s, "x1", "forward")
    assert s.tasks[0].status == "doing"
    s = store.move_task(s, "x1", "forward")
    assert s.tasks[0].status == "done"
    s = store.move_task(s, "x1", "backward")
    assert s.tasks[0].status == "doing"


def test_move_task_past_ends_is_noop():
    s = AppState(tasks=(_task(status="done"),))
    assert store.move_task(s, "x1", "forward") is s
    s = AppState(tasks=(_task(status="todo"),))
    assert store.move_task(s, "x1", "backward") is s


def test_move_task_bad_direction():
    s = AppState(tasks=(_task(),))
    with pytest.raises(ValueError):
        store.move_task(s, "x1", "sideways")


def test_store_allows_non_adjacent_transition():
    s = AppState(tasks=(_task(status="todo"),))
    out = store.update_task(s, _task(status="done"))
    assert out.tasks[0].status == "done"


def test_add_session_appends():
    s = utils.initial_data()
    new = Session("s9", "Demo Day", date(2023, 12, 1), "Event")
    out = store.add_session(s, new)
    assert out.sessions[-1] == new
    assert out.sessions[:-1] == s.sessions


def test_mark_attendance_upserts_single_record():
    s = AppState(
        members=(Member("m1", "Alex Johnson", "Lead", date(2023, 9, 1)),),
        sessions=(Session("s1", "Meetup", date(2023, 9, 15)),),
    )
    s = store.mark_attendance(s, "s1", "m1", "present")
    s = store.mark_attendance(s, "s1", "m1", "absent")

    matching = [a for a in s.attendance if a.session_id == "s1" and a.member_id == "m1"]
    assert len(matching) == 1
    assert matching[0].status == "absent"


def test_mark_attendance_keeps_position():
    s = utils.initial_data()
    out = store.mark_attendance(s, "s1", "m3", "present")
    assert len(out.attendance) == len(s.attendance)
    assert out.attendance[2].member_id == "m3"
    assert out.attendance[2].status == "present"
    assert s.attendance[2].status == "absent"


def test_mark_attendance_appends_new_pair():
    s = utils.initial_data()
    out = store.mark_attendance(s, "s3", "m4", "present")
    assert len(out.attendance) == len(s.attendance) + 1
    assert out.attendance[-1].session_id == "s3"
    assert out.attendance[-1].member_id == "m4"
