"""Voting deadline checks, applied before the vote service runs."""
from datetime import datetime, timezone
from typing import Any, Optional

from showcase.core import config
from showcase.core.exceptions import VotingClosedError
from showcase.core.utils import is_past, to_utc


def get_deadline_status(now: Optional[datetime] = None) -> dict[str, Any]:
    """Describe the configured voting deadline."""
    deadline = config.settings.VOTING_DEADLINE
    if deadline is None:
        return {"has_deadline": False, "deadline": None, "is_expired": False, "time_remaining_ms": None}

    now = to_utc(now) if now else datetime.now(timezone.utc)
    deadline = to_utc(deadline)
    return {
        "has_deadline": True,
        "deadline": deadline,
        "is_expired": is_past(deadline, now),
        "time_remaining_ms": int((deadline - now).total_seconds() * 1000),
    }


def ensure_voting_open(now: Optional[datetime] = None) -> None:
    """Raise VotingClosedError once the configured deadline has passed."""
    if is_past(config.settings.VOTING_DEADLINE, now):
        raise VotingClosedError()
