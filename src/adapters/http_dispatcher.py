"""httpx-backed request dispatcher.

Converts every request-level problem into a `FailureOutcome` so one bad
request never takes its siblings down:
- transport errors (connection refused, timeout, malformed response);
- non-2xx answers, which count as failures like in most HTTP clients.
"""

from __future__ import annotations

import httpx

from core.domain.models import FailureOutcome, Outcome, RequestDescriptor, SuccessOutcome
from core.interfaces.dispatcher import RequestDispatcher


def describe_error(exc: Exception) -> str:
    """Readable text for an exception, falling back to its class name."""

    text = str(exc).strip()
    name = exc.__class__.__name__
    if not text:
        return name
    return f"{name}: {text}"


class HttpxDispatcher(RequestDispatcher):
    """Sends descriptors through a shared `httpx.AsyncClient`."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def send(self, descriptor: RequestDescriptor, index: int) -> Outcome:
        try:
            response = await self._client.request(
                descriptor.method,
                descriptor.url,
                headers=descriptor.headers,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            return FailureOutcome(index=index, error=describe_error(exc))

        if not response.is_success:
            reason = response.reason_phrase or "error"
            return FailureOutcome(
                index=index,
                error=f"HTTP {response.status_code} {reason}",
                status_code=response.status_code,
            )

        return SuccessOutcome(
            index=index,
            status_code=response.status_code,
            body=response.text or "",
        )
