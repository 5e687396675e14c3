"""
Workouts API Client - Async client for the workouts REST API.

Every endpoint answers with ``{"success": bool, "data": ..., "error": ...}``.
Failures never raise: transport errors, non-2xx statuses, bodies that
are not JSON and ``success: false`` bodies all come back as a
``FetchResult`` carrying an error string for the caller to show.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx

from app.core.config import settings
from app.core.logging import get_logger
from app.services.analytics.calculator import StatsCalculator

logger = get_logger(__name__)


@dataclass
class FetchResult:
    """Outcome of one API call: either data or an error message."""
    data: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class WorkoutsApiClient:
    """
    Client for the workouts and exercises endpoints.

    Usage:
        client = WorkoutsApiClient()
        result = await client.list_user_workouts(user_id)
        if not result.ok:
            show(result.error)
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        calculator: Optional[StatsCalculator] = None,
    ):
        self.base_url = (base_url or settings.WORKOUTS_API_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.HTTP_TIMEOUT_SECONDS
        self.transport = transport
        self.calculator = calculator or StatsCalculator.from_settings()

    async def list_workouts(self) -> FetchResult:
        result = await self._request("GET", "/api/workouts", "Failed to load workouts")
        return self._with_list_default(result)

    async def list_user_workouts(self, user_id: str) -> FetchResult:
        result = await self._request(
            "GET",
            f"/api/workouts/user/{quote(user_id, safe='')}",
            "Failed to load workouts",
        )
        return self._with_list_default(result)

    async def get_workout(self, workout_id: str) -> FetchResult:
        return await self._request(
            "GET",
            f"/api/workouts/{quote(workout_id, safe='')}",
            "Failed to load workout",
        )

    async def create_workout(self, payload: Dict[str, Any]) -> FetchResult:
        return await self._request(
            "POST",
            "/api/workouts",
            "Failed to save workout",
            json=payload,
        )

    async def list_exercises(self, search: Optional[str] = None) -> FetchResult:
        params = {"search": search} if search else None
        result = await self._request(
            "GET",
            "/api/exercises",
            "Failed to load exercises",
            params=params,
        )
        return self._with_list_default(result)

    async def load_dashboard(self, user_id: str, reference_now: datetime) -> FetchResult:
        """
        Fetch a user's workouts and compute their dashboard.

        Statistics are only computed when the fetch succeeded.
        """
        result = await self.list_user_workouts(user_id)
        if not result.ok:
            return result
        return FetchResult(data=self.calculator.dashboard(result.data, reference_now))

    async def _request(
        self,
        method: str,
        path: str,
        default_error: str,
        **kwargs: Any,
    ) -> FetchResult:
        url = f"{self.base_url}{path}"

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.warning("Workouts API request failed", method=method, path=path, error=str(e))
            return FetchResult(error=str(e) or default_error)

        try:
            body = response.json()
        except ValueError:
            body = None

        if response.is_success and isinstance(body, dict) and body.get("success"):
            return FetchResult(data=body.get("data"))

        error = body.get("error") if isinstance(body, dict) else None

        logger.warning(
            "Workouts API returned an error",
            method=method,
            path=path,
            status_code=response.status_code,
            error=error,
        )

        return FetchResult(error=error or default_error)

    def _with_list_default(self, result: FetchResult) -> FetchResult:
        if result.ok and result.data is None:
            return FetchResult(data=[])
        return result
