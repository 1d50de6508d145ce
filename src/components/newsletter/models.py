"""
Newsletter component models.

Data models for newsletter e-mail sign-up.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from src.domain.errors import NewsError

# --- Input Models ---


@dataclass(frozen=True)
class SubscribeInput:
    """Input for signing an address up to the newsletter."""

    email: str | None


# --- Output Models ---


@dataclass(frozen=True)
class ValidateEmailOutput:
    """Output from email validation."""

    is_valid: bool
    normalized_email: str | None
    errors: list[NewsError] = field(default_factory=list)


@dataclass(frozen=True)
class SubscribeOutput:
    """Output from a sign-up."""

    email: str | None = None
    already_subscribed: bool = False
    errors: list[NewsError] = field(default_factory=list)
    success: bool = True
