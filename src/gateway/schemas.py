"""Pydantic schemas for requests issued against the Fizzy API."""

from collections.abc import Callable
from typing import Any, Literal
from pydantic import BaseModel, ConfigDict, Field


class RemoteRequest(BaseModel):
    """A single HTTP call against the account-scoped Fizzy API.

    Attributes:
        method: HTTP method.
        path: Path below the account scope, starting with "/".
        body: JSON body, or None to send no body.
        transform: Optional post-processing of the normalized response.
    """

    model_config = ConfigDict(frozen=True)

    method: Literal["GET", "POST", "PATCH", "PUT", "DELETE"] = Field(default="GET", description="HTTP method")
    path: str = Field(..., description="Account-relative API path")
    body: dict[str, Any] | None = Field(default=None, description="JSON request body")
    transform: Callable[[Any], Any] | None = Field(default=None, exclude=True)


class ToColumn(BaseModel):
    """Move a card into a regular column.

    Attributes:
        column_id: Target column identifier.
    """

    model_config = ConfigDict(frozen=True)

    column_id: str


class ToDone(BaseModel):
    """Close a card (Fizzy's "done" pseudo-column)."""

    model_config = ConfigDict(frozen=True)


class ToNotNow(BaseModel):
    """Park a card in Fizzy's "not now" pseudo-column."""

    model_config = ConfigDict(frozen=True)


MoveTarget = ToColumn | ToDone | ToNotNow


def parse_move_target(column: str) -> MoveTarget:
    """Turn the `column` argument of a move into a move command.

    "done" and "not_now" are verbs, not column ids; anything else is
    taken as a literal column id.
    """
    if column == "done":
        return ToDone()
    if column == "not_now":
        return ToNotNow()
    return ToColumn(column_id=column)
