"""
Subscriptions component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from src.domain.entities import Subscription, User
from src.domain.errors import NewsError

# --- Input Models ---


@dataclass(frozen=True)
class ListSubscriptionsInput:
    pass


@dataclass(frozen=True)
class CreateSubscriptionInput:
    """Input for subscribing the requesting user."""

    user_id: str | None  # None for anonymous requests
    subscription_id: str | None


@dataclass(frozen=True)
class GetUserInput:
    """Input for reading the requesting user."""

    user_id: str | None


# --- Output Models ---


@dataclass(frozen=True)
class SubscriptionListOutput:
    subscriptions: list[Subscription] = field(default_factory=list)
    errors: list[NewsError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class CreateSubscriptionOutput:
    """Output of subscription creation; ``applied`` is False for unknown ids."""

    applied: bool = False
    errors: list[NewsError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class UserOutput:
    user: User | None = None
    errors: list[NewsError] = field(default_factory=list)
    success: bool = True
