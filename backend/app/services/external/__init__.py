"""
External Services - Clients for services this backend talks to.

Services:
- WorkoutsApiClient: workouts and exercises REST API
"""
from app.services.external.workouts_api import FetchResult, WorkoutsApiClient

__all__ = [
    "FetchResult",
    "WorkoutsApiClient",
]
