"""ServiceResult and ServiceError, returned by every service operation.

The CLI renders them (Rich, quiet, or JSON) and derives the exit code from
``ok`` and, for checks, ``data["healthy"]``. Boundary findings are data on a
successful result; ``ok=False`` is reserved for runs that could not check
anything (invalid configuration, dangling layer references on validate).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Why an operation failed, with a stable machine-readable ``code``."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service operation.

    Attributes:
        ok: False only when the operation could not run to completion.
        op: Operation name, used to pick a renderer (``"check"``, ``"layers"``).
        data: Operation payload.
        warnings: Non-fatal problems, printed to stderr in human output.
        error: Set exactly when ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        """Failed result for *op* carrying a single :class:`ServiceError`."""
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail),
        )
