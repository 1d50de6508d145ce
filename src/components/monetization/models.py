"""
Monetization component models.

Data models for deciding between full and preview article content.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from src.domain.entities import SubscriptionPlan

AccessReason = Literal[
    "preview_requested",
    "free_article",
    "anonymous_visitor",
    "no_subscription",
    "subscriber",
]


# --- Access Control ---


@dataclass(frozen=True)
class AccessCheckInput:
    """Input for resolving access to an article."""

    preview_requested: bool
    is_premium: bool
    user_id: str | None = None  # None for anonymous visitors


@dataclass(frozen=True)
class AccessCheckOutput:
    """Output from access check."""

    has_full_access: bool
    reason: AccessReason
    tier: SubscriptionPlan | None = None  # Only set when it was looked up

    @property
    def is_preview(self) -> bool:
        return not self.has_full_access


def has_paid_tier(tier: SubscriptionPlan | None) -> bool:
    """Every tier other than "none" unlocks premium content."""
    return tier is not None and tier != "none"
