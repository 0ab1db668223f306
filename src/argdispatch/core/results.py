from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from .errors import DispatchError, ErrorCode


def _now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


@dataclass
class ResultObject:
    """Outcome of one ``run``: the chosen command, handler value and error events."""

    ok: bool = True
    command: str | None = None
    value: Any = None
    events: list[dict[str, Any]] = field(default_factory=list)

    def fail(self, message: str, *, code: ErrorCode, details: dict[str, Any] | None = None) -> None:
        self.ok = False
        self.events.append(
            {
                "kind": "error",
                "message": message,
                "code": code.name,
                "code_num": int(code),
                "ts": _now(),
                "details": details or {},
            }
        )

    def reject(self, exc: DispatchError) -> None:
        """Record a failure that happened before the handler ran."""
        self.fail(exc.message, code=exc.code, details=exc.details)

    def crash(self, exc: BaseException) -> None:
        """Record a failure raised by the handler itself."""
        self.fail(
            repr(exc),
            code=ErrorCode.E_HANDLER_FAILED,
            details={"command": self.command, "exception": type(exc).__name__},
        )

    @property
    def error_codes(self) -> list[int]:
        return [ev["code_num"] for ev in self.events if ev.get("kind") == "error"]

    def to_payload(self) -> dict[str, Any]:
        return {"ok": self.ok, "command": self.command, "events": self.events}
