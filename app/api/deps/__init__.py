"""API dependencies - re-exports from submodules."""

from .activity import (
    ActivityServiceDep,
    ValidIdentity,
    get_activity_service,
    validate_identity,
)

__all__ = [
    "ActivityServiceDep",
    "ValidIdentity",
    "get_activity_service",
    "validate_identity",
]
