from datetime import date

import pytest

import utils
from models import AppState, InvalidInputError, Member, Session


def test_validate_task_inputs():
    assert utils.validate_task_inputs("Book venue") == []
    assert utils.validate_task_inputs("   ") == ["Task title is required."]


def test_validate_session_inputs():
    assert utils.validate_session_inputs("Meetup", date(2023, 9, 15)) == []
    assert utils.validate_session_inputs("Meetup", "2023-09-15") == []
    assert utils.validate_session_inputs("", None) == ["Session title is required.", "Session date is required."]
    assert utils.validate_session_inputs("Meetup", "15/09/2023") == [
        "Session date must be a valid ISO date (YYYY-MM-DD)."
    ]


def test_new_task_defaults():
    t = utils.new_task("  Print flyers ", "high")
    assert t.title == "Print flyers"
    assert t.status == "todo"
    assert t.assignee_id is None
    assert t.due_date == date.today()
    assert t.priority == "high"
    assert t.description == ""


def test_new_task_rejects_empty_title():
    with pytest.raises(InvalidInputError):
        utils.new_task("")


def test_new_session_parses_date():
    s = utils.new_session("Demo Day", "2023-12-01")
    assert s.date == date(2023, 12, 1)
    assert s.type == "General"


def test_new_session_rejects_missing_date():
    with pytest.raises(InvalidInputError):
        utils.new_session("Demo Day", "")


def test_new_ids_are_unique():
    ids = {utils.new_id() for _ in range(200)}
    assert len(ids) == 200


def test_attendance_csv_seed():
    s = utils.initial_data()
    text = utils.attendance_csv_bytes(s, "s1").decode("utf-8")
    lines = text.split("\n")

    assert lines[0] == "Member Name,Role,Status,Session Date,Session Title"
    assert lines[1] == "Alex Johnson,Lead,present,2023-09-15,Introductory Meetup"
    assert lines[4] == "Casey Taylor,Faculty,absent,2023-09-15,Introductory Meetup"
    assert len(lines) == 1 + len(s.members) + 1
    assert text.endswith("\n")


def test_attendance_csv_quotes_commas():
    s = AppState(
        members=(Member("m1", "Lee, Jordan", "Member", date(2023, 9, 1)),),
        sessions=(Session("s1", "Q&A, part 1", date(2023, 9, 15)),),
    )
    text = utils.attendance_csv_bytes(s, "s1").decode("utf-8")
    assert text.split("\n")[1] == '"Lee, Jordan",Member,absent,2023-09-15,"Q&A, part 1"'


def test_attendance_csv_unknown_session():
    with pytest.raises(InvalidInputError):
        utils.attendance_csv_bytes(utils.initial_data(), "nope")


def test_attendance_csv_filename():
    s = utils.initial_data()
    assert utils.attendance_csv_filename(s.sessions[1]) == "attendance_2023-09-22.csv"


def test_frames():
    s = utils.initial_data()
    trend = utils.attendance_trend_frame(s)
    assert list(trend["attendance"]) == [60, 40, 0]
    assert list(trend["session"]) == ["Sep 15", "Sep 22", "Oct 05"]

    top = utils.contributors_frame(s, 2)
    assert list(top["name"]) == ["Alex", "Sam"]
    assert list(top["attendance_count"]) == [2, 1]


def test_frames_empty_state():
    assert utils.attendance_trend_frame(AppState()).empty
    assert utils.contributors_frame(AppState()).empty


def test_initial_data_shape():
    s = utils.initial_data()
    assert (len(s.members), len(s.tasks), len(s.sessions), len(s.attendance)) == (5, 4, 3, 8)


def test_parse_iso():
    assert utils.parse_iso("2023-09-15") == date(2023, 9, 15)
    with pytest.raises(ValueError):
        utils.parse_iso("15/09/2023")
