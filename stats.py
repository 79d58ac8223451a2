"""
stats.py
Read-only views computed from a snapshot (dashboard cards, charts, attendance panels).
"""

from __future__ import annotations

from dataclasses import dataclass

from models import TASK_STATUSES, AppState, Member, Session, Task


@dataclass(frozen=True)
class SessionStats:
    present: int
    absent: int
    percentage: int


@dataclass(frozen=True)
class HistoryEntry:
    session: Session
    status: str


@dataclass(frozen=True)
class MemberHistory:
    present_count: int
    total_sessions: int
    percentage: int
    entries: tuple[HistoryEntry, ...]


@dataclass(frozen=True)
class Contributor:
    member: Member
    present_count: int


def percent(part: int, whole: int) -> int:
    """
    Round part/whole*100 half-up using integer arithmetic; 0 when whole is 0.
    """
    if whole <= 0:
        return 0
    return (200 * part + whole) // (2 * whole)


# ---------- Lookups ----------

def find_member(state: AppState, member_id: str | None) -> Member | None:
    return next((m for m in state.members if m.id == member_id), None)


def find_session(state: AppState, session_id: str | None) -> Session | None:
    return next((s for s in state.sessions if s.id == session_id), None)


def find_task(state: AppState, task_id: str | None) -> Task | None:
    return next((t for t in state.tasks if t.id == task_id), None)


def assignee_name(state: AppState, task: Task) -> str:
    member = find_member(state, task.assignee_id)
    return member.name if member else "Unassigned"


def attendance_status(state: AppState, session_id: str, member_id: str) -> str | None:
    for a in state.attendance:
        if a.session_id == session_id and a.member_id == member_id:
            return a.status
    return None


# ---------- Attendance ----------

def _present_count(state: AppState, session_id: str) -> int:
    # records for ids missing from the roster are ignored
    member_ids = {m.id for m in state.members}
    return sum(
        1 for a in state.attendance
        if a.session_id == session_id and a.status == "present" and a.member_id in member_ids
    )


def session_stats(state: AppState, session_id: str) -> SessionStats:
    total = len(state.members)
    present = _present_count(state, session_id)
    return SessionStats(present=present, absent=total - present, percentage=percent(present, total))


def member_history(state: AppState, member_id: str) -> MemberHistory:
    entries = [
        HistoryEntry(session=s, status=attendance_status(state, s.id, member_id) or "absent")
        for s in state.sessions
    ]
    # newest first; sorted() is stable so same-day sessions keep insertion order
    entries = tuple(sorted(entries, key=lambda e: e.session.date, reverse=True))
    present = sum(1 for e in entries if e.status == "present")
    total = len(state.sessions)
    return MemberHistory(
        present_count=present,
        total_sessions=total,
        percentage=percent(present, total),
        entries=entries,
    )


def attendance_trend(state: AppState) -> list[tuple[Session, int]]:
    total = len(state.members)
    return [(s, percent(_present_count(state, s.id), total)) for s in state.sessions]


def average_turnout(state: AppState) -> int:
    trend = attendance_trend(state)
    if not trend:
        return 0
    return percent(sum(pct for _, pct in trend), 100 * len(trend))


def top_contributors(state: AppState, n: int = 5) -> list[Contributor]:
    counts = [
        Contributor(
            member=m,
            present_count=sum(1 for a in state.attendance if a.member_id == m.id and a.status == "present"),
        )
        for m in state.members
    ]
    counts.sort(key=lambda c: c.present_count, reverse=True)
    return counts[: max(n, 0)]


# ---------- Tasks ----------

def task_completion_rate(state: AppState) -> int:
    done = sum(1 for t in state.tasks if t.status == "done")
    return percent(done, len(state.tasks))


def tasks_by_status(state: AppState, status: str) -> list[Task]:
    return [t for t in state.tasks if t.status == status]


def status_counts(state: AppState) -> dict[str, int]:
    return {s: len(tasks_by_status(state, s)) for s in TASK_STATUSES}
