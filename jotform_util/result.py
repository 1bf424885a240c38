"""Defines the ApiResult object returned by JotformSession.execute()."""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class ApiResult:
    """Outcome of a single JotForm API call.

    `content` is the payload of the response envelope on success.
    On failure `content` is None and `error` holds the exception matching
    the HTTP status, `body` keeps the parsed error envelope.
    """

    status_code: int
    content: Any = None
    error: Optional[Exception] = None
    body: Any = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        """Returns content or raises the stored error"""
        if self.error is not None:
            raise self.error
        return self.content
