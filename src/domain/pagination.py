"""Offset/limit slicing shared by every paginated view."""

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")

DEFAULT_LIMIT = 20


def clamp_offset(offset: int, total: int) -> int:
    """Clamp offset into [0, total]."""
    return max(0, min(offset, total))


def paginate(items: Sequence[T], limit: int, offset: int) -> tuple[list[T], int]:
    """
    Slice ``items`` by offset/limit.

    Returns (page, total). The page never extends past the end of the
    collection and an offset at or beyond ``total`` yields an empty page.
    """
    total = len(items)
    start = clamp_offset(offset, total)
    end = min(start + max(limit, 0), total)
    return list(items[start:end]), total
