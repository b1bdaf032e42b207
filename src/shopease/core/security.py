"""Shared-secret admin gate."""

import hmac

from loguru import logger

ADMIN_PASSWORD_HEADER = "X-Admin-Password"


def authenticate_admin(candidate: str | None, expected: str) -> bool:
    """Check a submitted admin password against the configured one.

    Args:
        candidate: Password sent by the client, may be missing
        expected: Configured admin password

    Returns:
        True only for a non-empty exact match. The comparison runs in
        constant time.
    """
    if not candidate or not expected:
        return False

    matched = hmac.compare_digest(candidate.encode("utf-8"), expected.encode("utf-8"))
    if not matched:
        logger.warning("Rejected admin password")
    return matched
