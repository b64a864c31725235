"""Async HTTP client for the LernCasino API."""

from __future__ import annotations

from types import TracebackType
from typing import Any

import httpx

from lerncasino.auth.schemas import TokenResponse, UserResponse
from lerncasino.gamification.schemas import LeaderboardEntry, ProgressAck, ProgressUpdateRequest
from lerncasino.questions.schemas import QuestionResponse

DEFAULT_API_BASE = "http://localhost:4000"


class ApiError(Exception):
    """Any non-2xx response. The message is the response body."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class ApiClient:
    """Thin wrapper around the REST endpoints. No retries."""

    def __init__(
        self,
        base_url: str = DEFAULT_API_BASE,
        token: str | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.token = token
        self._http = httpx.AsyncClient(base_url=base_url, transport=transport)

    async def __aenter__(self) -> ApiClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,  # noqa: ANN401
        params: dict[str, Any] | None = None,
    ) -> Any:  # noqa: ANN401
        """Send a JSON request and return the decoded JSON body.

        Raises:
            ApiError: For any non-2xx status.
        """
        headers = {"Content-Type": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        response = await self._http.request(method, path, json=json, params=params, headers=headers)
        if not response.is_success:
            raise ApiError(response.text or f"HTTP {response.status_code}", response.status_code)
        return response.json()

    # --- auth ---

    async def register(self, username: str, password: str) -> TokenResponse:
        data = await self.request("POST", "/api/auth/register", json={"username": username, "password": password})
        result = TokenResponse.model_validate(data)
        self.token = result.token
        return result

    async def login(self, username: str, password: str) -> TokenResponse:
        data = await self.request("POST", "/api/auth/login", json={"username": username, "password": password})
        result = TokenResponse.model_validate(data)
        self.token = result.token
        return result

    # --- profile ---

    async def me(self) -> UserResponse:
        return UserResponse.model_validate(await self.request("GET", "/api/me"))

    async def update_me(self, *, username: str | None = None, password: str | None = None) -> UserResponse:
        body = {k: v for k, v in {"username": username, "password": password}.items() if v is not None}
        return UserResponse.model_validate(await self.request("PUT", "/api/me", json=body))

    # --- progress / content ---

    async def push_progress(self, update: ProgressUpdateRequest) -> ProgressAck:
        body = update.model_dump(by_alias=True, exclude_unset=True, exclude_none=True)
        return ProgressAck.model_validate(await self.request("POST", "/api/progress", json=body))

    async def questions(self, level: int) -> list[QuestionResponse]:
        data = await self.request("GET", "/api/questions", params={"level": level})
        return [QuestionResponse.model_validate(q) for q in data]

    async def leaderboard(self) -> list[LeaderboardEntry]:
        data = await self.request("GET", "/api/leaderboard")
        return [LeaderboardEntry.model_validate(e) for e in data]
