"""
insights.py
Mock "AI insights" generator and a runner that accepts any generator callable.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import TypeAlias

import config
from models import AppState

logger = logging.getLogger(__name__)

InsightGenerator: TypeAlias = Callable[[AppState], str | Awaitable[str]]

DEMO_INSIGHTS = """
### 🚀 AI Insights (Demo Mode)

*   **Member Engagement**: 85% of members attended the last workshop, indicating high interest in technical topics.
*   **Task Velocity**: Team is clearing tasks 20% faster than last month, but backlog is growing.
*   **Attendance Pattern**: Consistently low attendance from first-year members on Fridays.

**Recommendation**: Consider moving Friday sessions to Wednesday afternoons to accommodate first-year schedules.
"""


async def generate_club_insights(state: AppState, delay: float | None = None) -> str:
    """
    Simulates a model call: waits, then returns canned markdown.
    The snapshot is accepted for interface parity with a real generator.
    """
    wait = config.insights_delay() if delay is None else delay
    logger.info(
        "generating demo insights (%d members, %d tasks, %d sessions)",
        len(state.members), len(state.tasks), len(state.sessions),
    )
    await asyncio.sleep(wait)
    return DEMO_INSIGHTS


def run_insights(state: AppState, generator: InsightGenerator = generate_club_insights) -> str:
    """
    Call the generator and return its text, awaiting it when it returns an awaitable.
    """
    result = generator(state)
    if inspect.isawaitable(result):
        return asyncio.run(_await(result))
    return result


async def _await(awaitable: Awaitable[str]) -> str:
    return await awaitable
