"""Voting deadline endpoint."""
from fastapi import APIRouter

from showcase.schemas import DeadlineResponse
from showcase.services.deadline import get_deadline_status

router = APIRouter()


@router.get("", response_model=DeadlineResponse)
async def deadline_endpoint() -> DeadlineResponse:
    """Report whether a voting deadline is configured and whether it has passed."""
    return DeadlineResponse(**get_deadline_status())
