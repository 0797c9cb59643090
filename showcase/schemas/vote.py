"""Vote schemas."""
from typing import Optional

from showcase.schemas.common import CamelModel


class VoteResponse(CamelModel):
    voted: bool
    vote_count: int
    message: Optional[str] = None
