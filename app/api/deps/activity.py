"""Activity service dependency."""

from typing import Annotated

from fastapi import Depends, HTTPException, status

from app.services.activity import ActivityService, activity_service
from app.services.github.constants import is_valid_username


def get_activity_service() -> ActivityService:
    """Return the process-wide activity service."""
    return activity_service


def validate_identity(identity: str) -> str:
    """Reject identities that cannot be GitHub logins."""
    if not is_valid_username(identity):
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Invalid GitHub username: {identity!r}",
        )
    return identity


ActivityServiceDep = Annotated[ActivityService, Depends(get_activity_service)]
ValidIdentity = Annotated[str, Depends(validate_identity)]
