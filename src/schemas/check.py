"""Self-check result schema."""

from pydantic import BaseModel


class CheckResult(BaseModel):
    """Outcome of a single built-in conformance check.

    Attributes:
        name: Human-readable check name
        passed: Whether the check succeeded
        info: Optional detail shown next to the result
    """

    name: str
    passed: bool
    info: str | None = None
