"""Error descriptor attached to failed outcomes.

Uses a frozen Pydantic model so the descriptor is immutable, hashable and
validated on construction.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Error(BaseModel):
    """Immutable holder for an optional, human-readable failure message.

    An ``Error`` without a message is still an error: ``Failure(Error())`` and
    ``Failure()`` are different outcomes.

    Example:
        >>> Error("disk full").message
        'disk full'
        >>> Error().message is None
        True
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        revalidate_instances="never",
        json_schema_extra={"title": "Error", "examples": [{"message": "disk full"}, {"message": None}]},
    )

    message: str | None = Field(default=None, description="Optional human-readable message")

    def __init__(self, message: str | None = None, /, **data: Any) -> None:
        if message is not None:
            if "message" in data:
                raise TypeError("Error() got message both positionally and by keyword")
            data["message"] = message
        super().__init__(**data)

    def __str__(self) -> str:
        return self.message or ""
