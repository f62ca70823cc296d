"""
Google Docs tool errors.

Every failure a tool can report falls into one of three kinds:

- InputValidationError: the caller's arguments were rejected before any API call.
- DocsApiError: the Docs API (or the auth layer in front of it) reported a failure.
- OutputValidationError: the API answered, but not with the shape we expect.
"""
from typing import List, Optional, Tuple

from pydantic import ValidationError


class DocsToolError(Exception):
    """Base class for all errors raised by the Google Docs tools."""


def _format_loc(loc) -> str:
    return ".".join(str(part) for part in loc) or "<root>"


def _problems_from(exc: ValidationError) -> List[Tuple[str, str]]:
    return [(_format_loc(err["loc"]), err["msg"]) for err in exc.errors()]


class InputValidationError(DocsToolError):
    """Tool arguments failed validation."""

    def __init__(self, tool: str, problems: List[Tuple[str, str]]):
        self.tool = tool
        self.problems = problems
        details = "; ".join(f"{field}: {msg}" for field, msg in problems)
        super().__init__(f"Invalid arguments for {tool}: {details}")

    @classmethod
    def from_pydantic(cls, tool: str, exc: ValidationError) -> "InputValidationError":
        return cls(tool, _problems_from(exc))


class DocsApiError(DocsToolError):
    """The Docs API call failed (network, auth or non-success status)."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class OutputValidationError(DocsToolError):
    """The Docs API response is missing required fields or has the wrong types."""

    def __init__(self, tool: str, problems: List[Tuple[str, str]]):
        self.tool = tool
        self.problems = problems
        details = "; ".join(f"{field}: {msg}" for field, msg in problems)
        super().__init__(f"Unexpected response for {tool}: {details}")

    @classmethod
    def from_pydantic(cls, tool: str, exc: ValidationError) -> "OutputValidationError":
        return cls(tool, _problems_from(exc))
