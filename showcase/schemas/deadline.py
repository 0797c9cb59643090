"""Deadline schemas."""
from datetime import datetime
from typing import Optional

from showcase.schemas.common import CamelModel


class DeadlineResponse(CamelModel):
    has_deadline: bool
    deadline: Optional[datetime] = None
    is_expired: bool
    time_remaining_ms: Optional[int] = None
