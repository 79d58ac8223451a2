"""
auth.py
Mock sign-in gate: any non-empty email and password is accepted.
There are no stored credentials.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def validate_login_inputs(email: str, password: str) -> list[str]:
    errors: list[str] = []
    if not email.strip() or not password:
        errors.append("Please enter both email and password")
    return errors


def login(email: str, password: str) -> bool:
    if validate_login_inputs(email, password):
        return False
    logger.info("signed in as %s", email.strip())
    return True
