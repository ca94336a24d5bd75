# Services package

from app.services.activity import ActivityService, activity_service
from app.services.github import GitHubActivityReader

__all__ = [
    "ActivityService",
    "activity_service",
    "GitHubActivityReader",
]
