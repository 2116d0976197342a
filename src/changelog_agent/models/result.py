"""Tagged result returned by tool handlers."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ToolResult:
    """Either ``Ok(payload)`` or ``Err(kind, detail)``.

    Handlers return this instead of formatting error strings themselves; the
    tool executor turns it into message text.
    """

    payload: Optional[str] = None
    error_kind: Optional[str] = None
    detail: Optional[str] = None

    @classmethod
    def ok(cls, payload: str) -> "ToolResult":
        return cls(payload=payload)

    @classmethod
    def err(cls, kind: str, detail: str) -> "ToolResult":
        return cls(error_kind=kind, detail=detail)

    @property
    def is_ok(self) -> bool:
        return self.error_kind is None
