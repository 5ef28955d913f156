"""RFC 7807 problem details payload."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ProblemDetails(BaseModel):
    """Structured error body returned to API clients on failure.

    Unknown members are accepted and kept as extension members so that
    problem payloads built elsewhere pass through untouched.
    """

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    type: str | None = None
    title: str | None = None
    status: int | None = Field(default=None, ge=100, le=599)
    detail: str | None = None
    instance: str | None = None

    @property
    def extensions(self) -> dict[str, Any]:
        """Return the extension members carried alongside the standard ones."""

        return dict(self.model_extra or {})

    def as_dict(self) -> dict[str, Any]:
        """Return the serialisable payload for this problem."""

        payload: dict[str, Any] = {}
        for key in ("type", "title", "status", "detail", "instance"):
            value = getattr(self, key)
            if value is not None:
                payload[key] = value
        payload.update(self.extensions)
        return payload


__all__ = ["ProblemDetails"]
