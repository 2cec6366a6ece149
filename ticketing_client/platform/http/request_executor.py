"""
Resilient Request Executor

Issues one remote call with bounded retry and linear backoff.

Retry contract:
- Any TransportError / RemoteError on attempts 1..N-1 is retried after
  attempt_index * base_delay seconds (1s, 2s, ... with the default base delay)
- 4xx and 5xx are not told apart
- The error of the final attempt propagates unchanged
- Cancellation (anyio cancel scope) is never retried
"""

from typing import Any, Awaitable, Callable, Optional

import anyio
import httpx
import orjson

from ticketing_client.platform.config.core_setting import settings
from ticketing_client.platform.exception.exceptions import RemoteError, TransportError
from ticketing_client.platform.http.request_spec import RequestSpec
from ticketing_client.platform.logging.loguru_io import Logger


class ResilientRequestExecutor:
    def __init__(
        self,
        *,
        http_client: httpx.AsyncClient,
        max_attempts: int = settings.REQUEST_MAX_ATTEMPTS,
        base_delay: float = settings.REQUEST_BASE_DELAY_SECONDS,
        retry_non_idempotent: bool = settings.RETRY_NON_IDEMPOTENT,
        generic_error_message: str = settings.GENERIC_ERROR_MESSAGE,
        sleep: Callable[[float], Awaitable[None]] = anyio.sleep,
    ) -> None:
        self.http_client = http_client
        self.max_attempts = max_attempts
        self.base_delay = base_delay
        self.retry_non_idempotent = retry_non_idempotent
        self.generic_error_message = generic_error_message
        self._sleep = sleep

    @Logger.io
    async def execute(
        self,
        endpoint: str,
        request_spec: Optional[RequestSpec] = None,
        max_attempts: Optional[int] = None,
    ) -> Any:
        """
        Perform the call, retrying on failure.

        Args:
            endpoint: Path relative to the client's base URL
            request_spec: Method, body, credential (defaults to an anonymous GET)
            max_attempts: Attempt budget, defaults to the configured one

        Returns:
            Decoded JSON body, or None for an empty success body

        Raises:
            TransportError: No response on the final attempt
            RemoteError: Non-success response on the final attempt
        """
        spec = request_spec or RequestSpec()
        attempts = self.max_attempts if max_attempts is None else max_attempts
        if attempts < 1:
            raise ValueError(f'max_attempts must be >= 1, got {attempts}')

        if not self._may_retry(spec):
            attempts = 1

        for attempt in range(1, attempts + 1):
            try:
                return await self._send_once(endpoint, spec)
            except (TransportError, RemoteError) as e:
                if attempt >= attempts:
                    raise
                delay = attempt * self.base_delay
                Logger.base.warning(
                    f'🔁 [RETRY] {spec.method} {endpoint} failed '
                    f'(attempt {attempt}/{attempts}): {e.message} | retrying in {delay}s'
                )
                await self._sleep(delay)

        # Unreachable: the last attempt either returns or raises
        raise RuntimeError('retry loop exited without a result')

    def _may_retry(self, spec: RequestSpec) -> bool:
        return (
            spec.method.is_idempotent
            or spec.idempotency_key is not None
            or self.retry_non_idempotent
        )

    async def _send_once(self, endpoint: str, spec: RequestSpec) -> Any:
        try:
            response = await self.http_client.request(
                spec.method.value,
                endpoint,
                content=orjson.dumps(spec.body) if spec.body is not None else None,
                headers=spec.build_headers(),
            )
        except httpx.TransportError as e:
            raise TransportError(f'Network error: {str(e) or type(e).__name__}') from e

        if not response.is_success:
            raise RemoteError(self._extract_message(response), response.status_code)

        if not response.content:
            return None
        try:
            return orjson.loads(response.content)
        except orjson.JSONDecodeError as e:
            raise RemoteError('Malformed response from server', response.status_code) from e

    def _extract_message(self, response: httpx.Response) -> str:
        try:
            body = orjson.loads(response.content)
        except orjson.JSONDecodeError:
            return self.generic_error_message
        if isinstance(body, dict):
            message = body.get('message')
            if isinstance(message, str) and message:
                return message
        return self.generic_error_message
