"""
store.py
In-memory state store. Every operation takes a snapshot and returns a new one;
inputs are never mutated and untouched collections are passed through as-is.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from models import (
    TASK_STATUSES,
    AppState,
    AttendanceRecord,
    NotFoundError,
    Session,
    Task,
)

logger = logging.getLogger(__name__)


def _missing(kind: str, item_id: str, strict: bool) -> None:
    if strict:
        logger.warning("%s %s not found", kind, item_id)
        raise NotFoundError(f"{kind} {item_id!r} not found.")
    logger.debug("%s %s not found; ignoring", kind, item_id)


def add_task(state: AppState, task: Task) -> AppState:
    logger.debug("add task %s", task.id)
    return replace(state, tasks=state.tasks + (task,))


def update_task(state: AppState, task: Task, strict: bool = False) -> AppState:
    """
    Replace the task with the same id. An unknown id leaves the snapshot
    unchanged unless strict=True, which raises NotFoundError instead.
    """
    if not any(t.id == task.id for t in state.tasks):
        _missing("Task", task.id, strict)
        return state
    logger.debug("update task %s", task.id)
    return replace(state, tasks=tuple(task if t.id == task.id else t for t in state.tasks))


def delete_task(state: AppState, task_id: str, strict: bool = False) -> AppState:
    remaining = tuple(t for t in state.tasks if t.id != task_id)
    if len(remaining) == len(state.tasks):
        _missing("Task", task_id, strict)
        return state
    logger.debug("delete task %s", task_id)
    return replace(state, tasks=remaining)


def move_task(state: AppState, task_id: str, direction: str, strict: bool = False) -> AppState:
    """
    Move a task one stage along todo -> doing -> done.
    direction is 'forward' or 'backward'; moving past either end is a no-op.
    """
    if direction not in ("forward", "backward"):
        raise ValueError(f"Unknown direction {direction!r}.")
    task = next((t for t in state.tasks if t.id == task_id), None)
    if task is None:
        _missing("Task", task_id, strict)
        return state

    idx = TASK_STATUSES.index(task.status) + (1 if direction == "forward" else -1)
    if not 0 <= idx < len(TASK_STATUSES):
        return state
    return update_task(state, replace(task, status=TASK_STATUSES[idx]))


def add_session(state: AppState, session: Session) -> AppState:
    logger.debug("add session %s", session.id)
    return replace(state, sessions=state.sessions + (session,))


def mark_attendance(state: AppState, session_id: str, member_id: str, status: str) -> AppState:
    """
    Upsert the record for (session_id, member_id). An existing record keeps its
    position and gets the new status; otherwise a record is appended.
    """
    record = AttendanceRecord(session_id=session_id, member_id=member_id, status=status)
    attendance = list(state.attendance)
    for i, a in enumerate(attendance):
        if a.session_id == session_id and a.member_id == member_id:
            attendance[i] = record
            break
    else:
        attendance.append(record)

    logger.debug("mark %s as %s for session %s", member_id, status, session_id)
    return replace(state, attendance=tuple(attendance))
