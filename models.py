"""
models.py
Domain records (members, tasks, sessions, attendance) and the app snapshot.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date

ROLES = ("Member", "Lead", "Faculty")
TASK_STATUSES = ("todo", "doing", "done")
PRIORITIES = ("low", "medium", "high")
SESSION_TYPES = ("General", "Event", "Workshop")
ATTENDANCE_STATUSES = ("present", "absent")

# Kanban column labels, in board order
STATUS_LABELS = {
    "todo": "To Do",
    "doing": "In Progress",
    "done": "Done",
}


class ClubSyncError(Exception):
    """Base class for domain errors."""


class NotFoundError(ClubSyncError, LookupError):
    pass


class InvalidInputError(ClubSyncError, ValueError):
    pass


def _check_choice(kind: str, value: str, choices: tuple[str, ...]) -> None:
    if value not in choices:
        raise InvalidInputError(f"Invalid {kind} {value!r}; expected one of {', '.join(choices)}.")


@dataclass(frozen=True)
class Member:
    id: str
    name: str
    role: str  # Member/Lead/Faculty
    joined_at: date

    def __post_init__(self):
        _check_choice("role", self.role, ROLES)

    @property
    def first_name(self) -> str:
        return self.name.split(" ")[0]


@dataclass(frozen=True)
class Task:
    id: str
    title: str
    description: str
    status: str  # todo/doing/done
    assignee_id: str | None
    due_date: date
    priority: str  # low/medium/high

    def __post_init__(self):
        _check_choice("status", self.status, TASK_STATUSES)
        _check_choice("priority", self.priority, PRIORITIES)


@dataclass(frozen=True)
class Session:
    id: str
    title: str
    date: date
    type: str = "General"

    def __post_init__(self):
        _check_choice("session type", self.type, SESSION_TYPES)


@dataclass(frozen=True)
class AttendanceRecord:
    session_id: str
    member_id: str
    status: str  # present/absent

    def __post_init__(self):
        _check_choice("attendance status", self.status, ATTENDANCE_STATUSES)


@dataclass(frozen=True)
class AppState:
    members: tuple[Member, ...] = field(default_factory=tuple)
    tasks: tuple[Task, ...] = field(default_factory=tuple)
    sessions: tuple[Session, ...] = field(default_factory=tuple)
    attendance: tuple[AttendanceRecord, ...] = field(default_factory=tuple)
