"""Request dispatcher contract.

Why Protocol:
- Structural contract (duck typing) without rigid inheritance.
- The fan-out runner can be driven by the httpx adapter in production and
  by in-memory fakes in tests.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import Outcome, RequestDescriptor


@runtime_checkable
class RequestDispatcher(Protocol):
    """Minimal contract for sending one request of a batch.

    Design rules:
    - `send` is async because it does network I/O.
    - Request-level failures come back as a `FailureOutcome`, never raised.
    """

    async def send(self, descriptor: RequestDescriptor, index: int) -> Outcome:
        """Send `descriptor` as slot `index` and return its outcome."""

        ...
