"""
utils.py
Validation, ids, record factories, display frames, exports, sample data.
"""

from __future__ import annotations

import uuid
from datetime import date

import pandas as pd

import stats
from models import (
    AppState,
    AttendanceRecord,
    InvalidInputError,
    Member,
    Session,
    Task,
)

CSV_COLUMNS = ["Member Name", "Role", "Status", "Session Date", "Session Title"]


def parse_iso(d: str) -> date:
    return date.fromisoformat(d)


def new_id() -> str:
    return uuid.uuid4().hex[:9]


def validate_task_inputs(title: str) -> list[str]:
    errors: list[str] = []
    if not title.strip():
        errors.append("Task title is required.")
    return errors


def validate_session_inputs(title: str, session_date) -> list[str]:
    errors: list[str] = []
    if not title.strip():
        errors.append("Session title is required.")
    if session_date is None or session_date == "":
        errors.append("Session date is required.")
    elif isinstance(session_date, str):
        try:
            parse_iso(session_date)
        except ValueError:
            errors.append("Session date must be a valid ISO date (YYYY-MM-DD).")
    return errors


def new_task(title: str, priority: str = "medium", due_date: date | None = None) -> Task:
    """
    Build a fresh task for the board: status todo, unassigned, due today by default.
    """
    errors = validate_task_inputs(title)
    if errors:
        raise InvalidInputError(" ".join(errors))
    return Task(
        id=new_id(),
        title=title.strip(),
        description="",
        status="todo",
        assignee_id=None,
        due_date=due_date or date.today(),
        priority=priority,
    )


def new_session(title: str, session_date, session_type: str = "General") -> Session:
    errors = validate_session_inputs(title, session_date)
    if errors:
        raise InvalidInputError(" ".join(errors))
    if isinstance(session_date, str):
        session_date = parse_iso(session_date)
    return Session(id=new_id(), title=title.strip(), date=session_date, type=session_type)


# ---------- Display frames ----------

def attendance_trend_frame(state: AppState) -> pd.DataFrame:
    rows = [
        {"session": s.date.strftime("%b %d"), "attendance": pct}
        for s, pct in stats.attendance_trend(state)
    ]
    if not rows:
        return pd.DataFrame(columns=["session", "attendance"])
    return pd.DataFrame(rows)


def contributors_frame(state: AppState, n: int = 5) -> pd.DataFrame:
    rows = [
        {"name": c.member.first_name, "attendance_count": c.present_count}
        for c in stats.top_contributors(state, n)
    ]
    if not rows:
        return pd.DataFrame(columns=["name", "attendance_count"])
    return pd.DataFrame(rows)


def member_history_frame(history: stats.MemberHistory) -> pd.DataFrame:
    rows = [
        {
            "date": e.session.date.isoformat(),
            "session": e.session.title,
            "type": e.session.type,
            "status": e.status,
        }
        for e in history.entries
    ]
    if not rows:
        return pd.DataFrame(columns=["date", "session", "type", "status"])
    return pd.DataFrame(rows)


# ---------- Exports ----------

def attendance_csv_bytes(state: AppState, session_id: str) -> bytes:
    """
    One row per member for the session; members without a record count as absent.
    Fields containing commas or quotes are quoted.
    """
    session = stats.find_session(state, session_id)
    if session is None:
        raise InvalidInputError(f"Unknown session {session_id!r}.")
    rows = [
        [
            m.name,
            m.role,
            stats.attendance_status(state, session.id, m.id) or "absent",
            session.date.isoformat(),
            session.title,
        ]
        for m in state.members
    ]
    df = pd.DataFrame(rows, columns=CSV_COLUMNS)
    return df.to_csv(index=False, lineterminator="\n").encode("utf-8")


def attendance_csv_filename(session: Session) -> str:
    return f"attendance_{session.date.isoformat()}.csv"


# ---------- Sample data ----------

def initial_data() -> AppState:
    """
    Seed snapshot shown on first load: 5 members, 4 tasks, 3 sessions.
    """
    d = parse_iso
    members = (
        Member("m1", "Alex Johnson", "Lead", d("2023-09-01")),
        Member("m2", "Sam Smith", "Member", d("2023-09-05")),
        Member("m3", "Jordan Lee", "Member", d("2023-09-10")),
        Member("m4", "Casey Taylor", "Faculty", d("2023-08-15")),
        Member("m5", "Morgan Davis", "Member", d("2023-10-01")),
    )
    tasks = (
        Task("t1", "Plan Orientation Event", "Create agenda and book venue", "done", "m1", d("2023-10-01"), "high"),
        Task("t2", "Design Club T-Shirts", "Collect sizes and finalize design", "doing", "m2", d("2023-10-15"), "medium"),
        Task("t3", "Update Website", "Add new member bios", "todo", "m3", d("2023-10-20"), "low"),
        Task("t4", "Budget Approval", "Submit Q4 budget to student council", "todo", "m1", d("2023-10-25"), "high"),
    )
    sessions = (
        Session("s1", "Introductory Meetup", d("2023-09-15"), "General"),
        Session("s2", "Workshop: React Basics", d("2023-09-22"), "Workshop"),
        Session("s3", "Hackathon Prep", d("2023-10-05"), "Event"),
    )
    attendance = (
        AttendanceRecord("s1", "m1", "present"),
        AttendanceRecord("s1", "m2", "present"),
        AttendanceRecord("s1", "m3", "absent"),
        AttendanceRecord("s1", "m5", "present"),
        AttendanceRecord("s2", "m1", "present"),
        AttendanceRecord("s2", "m2", "absent"),
        AttendanceRecord("s2", "m3", "present"),
        AttendanceRecord("s2", "m5", "absent"),
    )
    return AppState(members=members, tasks=tasks, sessions=sessions, attendance=attendance)
