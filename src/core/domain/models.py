"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation and self-documenting fields (Field) without coupling
  the core to I/O libraries.
- The outcome variants serialize cleanly for reporting and tests.

Note:
- These models describe *what* a batch is, not *how* it is sent.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class RequestDescriptor(BaseModel):
    """Template of the request sent by every slot of a batch.

    Frozen: one instance is shared by all concurrent dispatches.
    """

    model_config = ConfigDict(frozen=True)

    method: str = Field(
        default="GET",
        min_length=1,
        description="HTTP method.",
    )
    url: str = Field(
        ...,
        min_length=1,
        description="Absolute target URL. Only the transport validates it.",
    )
    headers: dict[str, str] = Field(
        default_factory=lambda: {"Content-Type": "application/json"},
        description="Headers sent with each request.",
    )


class SuccessOutcome(BaseModel):
    """A request that completed with a 2xx status."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["success"] = "success"
    index: int = Field(..., ge=0, description="0-based dispatch index.")
    status_code: int = Field(..., ge=100, le=599)
    body: str = Field(default="", description="Raw response body.")

    @property
    def ok(self) -> bool:
        return True


class FailureOutcome(BaseModel):
    """A request that failed in transport or answered with a non-2xx status."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["failure"] = "failure"
    index: int = Field(..., ge=0, description="0-based dispatch index.")
    error: str = Field(..., min_length=1, description="Human readable error.")
    status_code: int | None = Field(
        default=None,
        ge=100,
        le=599,
        description="Status code, only when the server actually answered.",
    )

    @property
    def ok(self) -> bool:
        return False


Outcome = Annotated[Union[SuccessOutcome, FailureOutcome], Field(discriminator="kind")]


class BatchReport(BaseModel):
    """Result of one fan-out invocation."""

    requested: int = Field(..., ge=0, description="Number of requests asked for.")
    outcomes: list[Outcome] = Field(
        default_factory=list,
        description="Outcomes ordered by dispatch index.",
    )
    elapsed_seconds: float = Field(default=0.0, ge=0.0)
    error: str | None = Field(
        default=None,
        description="Top-level aggregation failure, if the batch itself failed.",
    )

    @property
    def completed(self) -> bool:
        return self.error is None

    @property
    def succeeded(self) -> int:
        return sum(1 for o in self.outcomes if o.ok)

    @property
    def failed(self) -> int:
        return sum(1 for o in self.outcomes if not o.ok)
