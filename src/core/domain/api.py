"""Request and response values exchanged with the Issuetrak client.

Each request carries the target API (base URL and version) plus the payload of
one operation. They are built immediately before a call and discarded after.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.domain.models import IssuetrakDTO


class ApiRequest(BaseModel):
    """Fields common to every Issuetrak request."""

    model_config = ConfigDict(frozen=True)

    base_url: str = Field(..., min_length=1)
    api_version: int = Field(..., gt=0)
    should_include_request_logging: bool = Field(
        default=False,
        description="Log the HTTP exchange at INFO instead of DEBUG.",
    )


class ListRequest(ApiRequest):
    """Request without payload (e.g. "get all causes")."""


class EntityRequest(ApiRequest):
    """Request addressing one entity by its identifier."""

    entity_id: int | str


class IssueRequest(ApiRequest):
    issue_number: int
    should_include_notes: bool = False


class IssueListRequest(ApiRequest):
    issue_numbers: tuple[int, ...] = Field(..., min_length=1)
    should_include_notes: bool = False


class PayloadRequest(ApiRequest):
    """Request whose body is a DTO from `core.domain.models`."""

    payload: IssuetrakDTO


class ApiResponse(BaseModel):
    """Result of one client call.

    `response_object` holds the decoded JSON body when there is one;
    `response_text` always holds the raw body text when the server sent one.
    """

    status_code: int
    reason_phrase: str | None = None
    response_text: str | None = None
    response_object: Any | None = None

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code <= 299
