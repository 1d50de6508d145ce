from dataclasses import dataclass
from typing import Literal

ErrorCode = Literal["not_found", "bad_request"]


@dataclass(frozen=True)
class NewsError:
    """Expected failure returned by a component instead of raised."""

    code: ErrorCode
    message: str
    field: str | None = None


def not_found(message: str, field: str | None = None) -> NewsError:
    return NewsError(code="not_found", message=message, field=field)


def bad_request(message: str, field: str | None = None) -> NewsError:
    return NewsError(code="bad_request", message=message, field=field)
