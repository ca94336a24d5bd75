"""
Activity endpoints for the portfolio's GitHub stats widget.

The frontend reads the current state and may trigger a refresh (e.g. a
retry button after an error). A failed refresh is not an HTTP error: the
response carries `status: "error"` and the last good summary.
"""

import logging

from fastapi import APIRouter

from app.api.deps import ActivityServiceDep, ValidIdentity
from app.schemas.activity import ActivityStateResponse

router = APIRouter(prefix="/activity", tags=["activity"])
logger = logging.getLogger(__name__)


@router.get("", response_model=ActivityStateResponse)
async def get_activity(service: ActivityServiceDep) -> ActivityStateResponse:
    """Get the activity summary for the portfolio owner."""
    state = service.get_state(service.default_identity)
    return ActivityStateResponse.from_state(state)


@router.post("/refresh", response_model=ActivityStateResponse)
async def refresh_activity(service: ActivityServiceDep) -> ActivityStateResponse:
    """Re-fetch and re-aggregate the portfolio owner's activity."""
    state = await service.refresh(service.default_identity)
    return ActivityStateResponse.from_state(state)


@router.get("/{identity}", response_model=ActivityStateResponse)
async def get_identity_activity(
    identity: ValidIdentity,
    service: ActivityServiceDep,
) -> ActivityStateResponse:
    """
    Get the activity summary for any GitHub user.

    Returns a `loading` state with an empty summary if the identity has
    never been refreshed.
    """
    return ActivityStateResponse.from_state(service.get_state(identity))


@router.post("/{identity}/refresh", response_model=ActivityStateResponse)
async def refresh_identity_activity(
    identity: ValidIdentity,
    service: ActivityServiceDep,
) -> ActivityStateResponse:
    """Re-fetch and re-aggregate activity for any GitHub user."""
    logger.info(f"Activity refresh requested for {identity}")
    state = await service.refresh(identity)
    return ActivityStateResponse.from_state(state)
