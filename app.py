"""
app.py
ClubSync: Streamlit club dashboard (task board, attendance, insights).
Run: streamlit run app.py
"""

from __future__ import annotations

import logging
from dataclasses import replace

import streamlit as st

import auth
import config
import insights
import stats
import store
import utils
from models import PRIORITIES, STATUS_LABELS, TASK_STATUSES, AppState

st.set_page_config(page_title="ClubSync", layout="wide")

logger = logging.getLogger(__name__)


def init_once():
    logging.basicConfig(
        level=config.log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if "data" not in st.session_state:
        st.session_state.data = utils.initial_data()
    if "logged_in" not in st.session_state:
        st.session_state.logged_in = False
        st.session_state.email = None


def get_state() -> AppState:
    return st.session_state.data


def commit(new_state: AppState) -> None:
    # Every UI mutation goes through here so the session holds exactly one snapshot
    st.session_state.data = new_state


def logout():
    st.session_state.logged_in = False
    st.session_state.email = None
    st.success("Logged out.")


def login_screen():
    st.title("✨ ClubSync")
    st.caption("Next-gen management for your squad.")

    col1, col2 = st.columns([1, 1])
    with col1:
        email = st.text_input("Email address")
        password = st.text_input("Password", type="password")
        if st.button("Sign In", type="primary"):
            if auth.login(email, password):
                st.session_state.logged_in = True
                st.session_state.email = email.strip()
                st.rerun()
            else:
                for e in auth.validate_login_inputs(email, password):
                    st.error(e)

    with col2:
        st.info("Demo mode: any email and password will sign you in.")


# ---------- Dashboard ----------

def dashboard_page():
    st.header("📊 Dashboard")
    data = get_state()

    done = len(stats.tasks_by_status(data, "done"))
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Active members", len(data.members), help="Total registered")
    c2.metric("Task completion", f"{stats.task_completion_rate(data)}%")
    c2.caption(f"{done}/{len(data.tasks)} tasks done")
    c3.metric("Sessions held", len(data.sessions))
    c4.metric("Avg turnout", f"{stats.average_turnout(data)}%")

    st.divider()

    col1, col2 = st.columns(2)
    with col1:
        st.subheader("Attendance trend")
        trend = utils.attendance_trend_frame(data)
        if trend.empty:
            st.caption("No sessions yet.")
        else:
            st.line_chart(trend, x="session", y="attendance")
    with col2:
        st.subheader("Top contributors")
        top = utils.contributors_frame(data, config.top_contributors_limit())
        if top.empty:
            st.caption("No members yet.")
        else:
            st.bar_chart(top, x="name", y="attendance_count", horizontal=True)

    st.divider()

    st.subheader("✨ AI Studio Insights")
    if st.button("Generate Report", type="primary"):
        with st.spinner("Analyzing..."):
            st.session_state.insights = insights.run_insights(data)
    if st.session_state.get("insights"):
        st.markdown(st.session_state.insights)
    else:
        st.caption("Unlock data-driven strategies for your club.")


# ---------- Task board ----------

def add_task_form():
    with st.expander("➕ New task"):
        c1, c2 = st.columns([3, 1])
        with c1:
            title = st.text_input("What needs to be done?", key="new_task_title")
        with c2:
            priority = st.selectbox("Priority", PRIORITIES, index=PRIORITIES.index("medium"), key="new_task_priority")

        errors = utils.validate_task_inputs(title)
        if st.button("Add task", type="primary", disabled=bool(errors)):
            commit(store.add_task(get_state(), utils.new_task(title, priority)))
            st.success("Task added.")
            st.rerun()


def task_card(task):
    data = get_state()
    with st.container(border=True):
        st.markdown(f"**{task.title}**")
        st.caption(f"{task.priority} · due {task.due_date.isoformat()} · {stats.assignee_name(data, task)}")
        b1, b2, b3 = st.columns(3)
        if task.status != "todo" and b1.button("◀", key=f"back_{task.id}", help="Move back"):
            commit(store.move_task(data, task.id, "backward"))
            st.rerun()
        if b2.button("Edit", key=f"edit_{task.id}"):
            st.session_state.edit_task_id = task.id
            st.rerun()
        if task.status != "done" and b3.button("▶", key=f"fwd_{task.id}", help="Move forward"):
            commit(store.move_task(data, task.id, "forward"))
            st.rerun()


def edit_task_form(task):
    data = get_state()
    st.subheader("✏️ Edit task")

    title = st.text_input("Title", value=task.title)
    c1, c2, c3 = st.columns(3)
    with c1:
        priority = st.selectbox("Priority", PRIORITIES, index=PRIORITIES.index(task.priority))
    with c2:
        due_date = st.date_input("Due date", value=task.due_date)
    with c3:
        status = st.selectbox(
            "Status", TASK_STATUSES, index=TASK_STATUSES.index(task.status),
            format_func=lambda s: STATUS_LABELS[s],
        )

    options = [None] + [m.id for m in data.members]
    current = task.assignee_id if stats.find_member(data, task.assignee_id) else None
    assignee_id = st.selectbox(
        "Assignee", options, index=options.index(current),
        format_func=lambda mid: "Unassigned" if mid is None else stats.find_member(data, mid).name,
    )
    description = st.text_area("Description", value=task.description)

    errors = utils.validate_task_inputs(title)
    for e in errors:
        st.error(e)

    c1, c2, c3 = st.columns(3)
    with c1:
        if st.button("Save changes", type="primary", disabled=bool(errors)):
            updated = replace(
                task,
                title=title.strip(),
                priority=priority,
                due_date=due_date,
                status=status,
                assignee_id=assignee_id,
                description=description,
            )
            commit(store.update_task(data, updated))
            st.session_state.edit_task_id = None
            st.success("Task updated.")
            st.rerun()
    with c2:
        if st.button("Cancel edit"):
            st.session_state.edit_task_id = None
            st.rerun()
    with c3:
        confirm = st.checkbox("Confirm delete", value=False, key="del_task_confirm")
        if st.button("Delete", type="secondary", disabled=not confirm):
            commit(store.delete_task(data, task.id))
            st.session_state.edit_task_id = None
            st.success("Task deleted.")
            st.rerun()


def tasks_page():
    st.header("✅ Task Board")
    add_task_form()

    data = get_state()
    editing = stats.find_task(data, st.session_state.get("edit_task_id"))
    if editing:
        edit_task_form(editing)
        st.divider()

    counts = stats.status_counts(data)
    columns = st.columns(len(TASK_STATUSES))
    for col, status in zip(columns, TASK_STATUSES):
        with col:
            st.subheader(f"{STATUS_LABELS[status]} ({counts[status]})")
            for task in stats.tasks_by_status(data, status):
                task_card(task)


# ---------- Attendance ----------

def add_session_form():
    with st.sidebar.expander("➕ New session"):
        title = st.text_input("Session title", key="new_session_title")
        session_date = st.date_input("Date", value=None, key="new_session_date")
        errors = utils.validate_session_inputs(title, session_date)
        if st.button("Create", type="primary", disabled=bool(errors)):
            session = utils.new_session(title, session_date)
            commit(store.add_session(get_state(), session))
            st.session_state.selected_session_id = session.id
            st.rerun()


def member_history_panel(member_id: str):
    data = get_state()
    member = stats.find_member(data, member_id)
    if member is None:
        return
    history = stats.member_history(data, member_id)

    st.subheader(f"👤 {member.name}")
    st.caption(f"{member.role} · Joined {member.joined_at.isoformat()}")
    c1, c2 = st.columns(2)
    c1.metric("Attendance rate", f"{history.percentage}%")
    c2.metric("Sessions attended", f"{history.present_count}/{history.total_sessions}")
    frame = utils.member_history_frame(history)
    if frame.empty:
        st.caption("No sessions recorded yet.")
    else:
        st.dataframe(frame, use_container_width=True, hide_index=True)
    if st.button("Close"):
        st.session_state.viewing_member_id = None
        st.rerun()


def attendance_page():
    st.header("📅 Attendance")
    add_session_form()

    data = get_state()
    if not data.sessions:
        st.info("No sessions yet. Create one from the sidebar.")
        return

    ids = [s.id for s in data.sessions]
    selected = st.session_state.get("selected_session_id")
    if selected not in ids:
        selected = ids[0]
    selected = st.selectbox(
        "Session", ids, index=ids.index(selected),
        format_func=lambda sid: f"{stats.find_session(data, sid).title} ({stats.find_session(data, sid).date.isoformat()})",
    )
    st.session_state.selected_session_id = selected
    session = stats.find_session(data, selected)

    s = stats.session_stats(data, session.id)
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Present", s.present)
    c2.metric("Absent", s.absent)
    c3.metric("Turnout", f"{s.percentage}%")
    with c4:
        st.download_button(
            "Export CSV",
            data=utils.attendance_csv_bytes(data, session.id),
            file_name=utils.attendance_csv_filename(session),
            mime="text/csv",
        )

    st.divider()

    for member in data.members:
        status = stats.attendance_status(data, session.id, member.id)
        c1, c2, c3, c4 = st.columns([3, 1, 1, 1])
        c1.markdown(f"**{member.name}** · {member.role} · _{status or 'unmarked'}_")
        if c2.button("Present", key=f"p_{session.id}_{member.id}", disabled=status == "present"):
            commit(store.mark_attendance(data, session.id, member.id, "present"))
            st.rerun()
        if c3.button("Absent", key=f"a_{session.id}_{member.id}", disabled=status == "absent"):
            commit(store.mark_attendance(data, session.id, member.id, "absent"))
            st.rerun()
        if c4.button("History", key=f"h_{member.id}"):
            st.session_state.viewing_member_id = member.id
            st.rerun()

    if st.session_state.get("viewing_member_id"):
        st.divider()
        member_history_panel(st.session_state.viewing_member_id)


def main_app():
    st.sidebar.title("✨ ClubSync")
    st.sidebar.caption(f"Logged in as: {st.session_state.email}")

    pages = ["Dashboard", "Task Board", "Attendance"]
    if "page" not in st.session_state:
        st.session_state.page = "Dashboard"
    st.session_state.page = st.sidebar.radio("Navigate", pages, index=pages.index(st.session_state.page))

    if st.sidebar.button("Logout"):
        logout()
        st.rerun()

    if st.session_state.page == "Dashboard":
        dashboard_page()
    elif st.session_state.page == "Task Board":
        tasks_page()
    elif st.session_state.page == "Attendance":
        attendance_page()


# --------- App entry ---------

def run():
    init_once()

    if not st.session_state.logged_in:
        login_screen()
        return

    main_app()


if __name__ == "__main__":
    run()
