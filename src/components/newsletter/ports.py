"""
Newsletter component ports.
"""

from __future__ import annotations

from typing import Protocol


class NewsletterRepoPort(Protocol):
    """Storage for newsletter sign-ups."""

    def create_newsletter_subscription(self, email: str) -> bool:
        """
        Record a normalized e-mail address.

        Returns:
            True if the address is new, False if it was already recorded
        """
        ...
