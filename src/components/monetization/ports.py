"""
Monetization component ports.
"""

from __future__ import annotations

from typing import Protocol

from src.domain.entities import User


class UserTierPort(Protocol):
    """
    Port for looking up a visitor's subscription tier.

    Implementations:
    - InMemoryNewsStore: user tiers written by subscription creation
    """

    def get_user(self, user_id: str) -> User:
        """
        Get the user for an id.

        Args:
            user_id: Identity taken from the request

        Returns:
            User with tier "none" if the user never subscribed
        """
        ...
