"""HTTP API client for Sleeper API."""

import asyncio
from typing import Any, Awaitable, Optional
import httpx
from tenacity import (
    AsyncRetrying,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
)
from rich.console import Console

from sleeper_client.config import Config

console = Console()

USER_AGENT = "sleeper-client/1.0.0"


class SleeperAPIError(Exception):
    """Exception raised for Sleeper API errors."""

    def __init__(self, status_code: Optional[int], message: str):
        self.status_code = status_code
        self.message = message
        if status_code is None:
            super().__init__(message)
        else:
            super().__init__(f"API Error {status_code}: {message}")


class NotFoundError(SleeperAPIError):
    """The requested resource does not exist."""

    def __init__(self, message: str):
        super().__init__(404, message)


class RateLimitedError(SleeperAPIError):
    """Sleeper rejected the request with 429."""

    def __init__(self, message: str = "Rate limit exceeded. Please try again later."):
        super().__init__(429, message)


class UpstreamServerError(SleeperAPIError):
    """Sleeper answered with a 5xx status."""


class RequestTimeoutError(SleeperAPIError):
    """A single request exceeded the configured timeout."""

    def __init__(self, message: str):
        super().__init__(None, message)


class NetworkError(SleeperAPIError):
    """The request never produced a response."""

    def __init__(self, message: str):
        super().__init__(None, message)


class MalformedResponseError(SleeperAPIError):
    """Response body was not valid JSON."""


class CompositionError(Exception):
    """A helper that joins several fetches failed.

    The failing upstream exception is kept on ``cause`` (and chained as
    ``__cause__``) so callers can still inspect it.
    """

    def __init__(self, operation: str, cause: BaseException):
        self.operation = operation
        self.cause = cause
        super().__init__(f"Failed to fetch {operation}: {cause}")


# Failures worth another attempt when retries are enabled
TRANSIENT_ERRORS = (RateLimitedError, UpstreamServerError, RequestTimeoutError, NetworkError)


class SleeperAPIClient:
    """HTTP client for Sleeper API with optional retry logic."""

    BASE_URL = "https://api.sleeper.app/v1"

    def __init__(self, config: Optional[Config] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config or Config()
        self.base_url = (self.config.base_url or self.BASE_URL).rstrip("/")
        self.client = httpx.AsyncClient(
            timeout=httpx.Timeout(self.config.timeout),
            limits=httpx.Limits(max_connections=10, max_keepalive_connections=5),
            headers={"Accept": "application/json", "User-Agent": USER_AGENT},
            transport=transport,
        )

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.aclose()

    async def aclose(self) -> None:
        await self.client.aclose()

    def _raise_for_status(self, response: httpx.Response, endpoint: str) -> None:
        """Map an error status to the matching SleeperAPIError subclass."""
        status = response.status_code
        if status < 400:
            return
        if status == 404:
            raise NotFoundError(f"Resource not found: {endpoint}")
        if status == 429:
            raise RateLimitedError()
        if status >= 500:
            raise UpstreamServerError(status, f"Sleeper server error ({status}). Please try again later.")
        raise SleeperAPIError(status, f"HTTP {status}: {response.reason_phrase}")

    async def _make_request(self, endpoint: str, params: Optional[dict] = None) -> httpx.Response:
        """Make a single HTTP request and classify its failure."""
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        try:
            response = await self.client.get(url, params=params)
        except httpx.TimeoutException as e:
            raise RequestTimeoutError(f"Request timeout after {self.config.timeout}s: {endpoint}") from e
        except httpx.RequestError as e:
            console.print(f"[red]Request error: {e}[/red]")
            raise NetworkError(f"Network error - please check your connection ({e})") from e

        self._raise_for_status(response, endpoint)
        return response

    async def get_json(self, endpoint: str, *, params: Optional[dict] = None) -> Any:
        """Get JSON data from API endpoint."""
        retrying = AsyncRetrying(
            stop=stop_after_attempt(max(1, self.config.max_attempts)),
            wait=wait_exponential(multiplier=1, min=1, max=10),
            retry=retry_if_exception_type(TRANSIENT_ERRORS),
            before_sleep=lambda state: console.print(
                f"[yellow]Retrying request to {endpoint} "
                f"(attempt {state.attempt_number}: {state.outcome.exception()})[/yellow]"
            ),
            reraise=True,
        )
        async for attempt in retrying:
            with attempt:
                response = await self._make_request(endpoint, params)

        try:
            return response.json()
        except ValueError as e:
            raise MalformedResponseError(response.status_code, f"Invalid JSON response from Sleeper API: {e}") from e


PARAM_LABELS = {
    "league_id": "League ID",
    "user_id": "User ID",
    "draft_id": "Draft ID",
    "username": "Username",
    "week": "week",
    "season": "season",
}


def require(**params: Any) -> None:
    """Raise ValueError before any request if a required parameter is empty."""
    if all(params.values()):
        return
    labels = [PARAM_LABELS.get(name, name) for name in params]
    if len(labels) == 1:
        raise ValueError(f"{labels[0]} is required")
    raise ValueError(f"{' and '.join(labels)} are both required")


def expect_list(data: Any, what: str) -> list:
    """Guard against payloads that parsed as JSON but are not arrays."""
    if not isinstance(data, list):
        raise MalformedResponseError(200, f"Expected a list of {what}, got {type(data).__name__}")
    return data


async def fetch_all(operation: str, *requests: Awaitable[Any]) -> list:
    """Await independent requests together, all-or-nothing.

    The first upstream failure is wrapped in a CompositionError naming the
    operation. Sibling requests are left to finish and their results dropped.
    """
    try:
        return await asyncio.gather(*requests)
    except SleeperAPIError as e:
        raise CompositionError(operation, e) from e
