"""
Subscriptions component ports.
"""

from __future__ import annotations

from typing import Protocol

from src.domain.entities import Subscription, User


class SubscriptionStorePort(Protocol):
    """Subscription catalog plus per-user tier storage."""

    def get_subscriptions(self) -> list[Subscription]:
        """The static subscription catalog."""
        ...

    def create_subscription(self, user_id: str, subscription_id: str) -> bool:
        """
        Give a user the tier of a catalog entry.

        Returns:
            True if the catalog entry exists and the tier was written,
            False if the subscription id is unknown (nothing changes)
        """
        ...

    def get_user(self, user_id: str) -> User:
        """Get user (tier "none" if the user never subscribed)."""
        ...
