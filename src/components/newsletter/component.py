"""
Newsletter component.

E-mail sign-up for the newsletter block. Addresses are normalized
(trimmed, lower-cased) and recorded once; repeated sign-ups succeed.
"""

from __future__ import annotations

import logging
import re

from src.domain.errors import bad_request

from .models import SubscribeInput, SubscribeOutput, ValidateEmailOutput
from .ports import NewsletterRepoPort

logger = logging.getLogger(__name__)

# --- Email Validation Regex (RFC 5322 simplified) ---

EMAIL_REGEX = re.compile(
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+@"
    r"[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)+$"
)

MAX_EMAIL_LENGTH = 254


def validate_email(email: str | None) -> ValidateEmailOutput:
    """
    Validate email address format.

    Args:
        email: Email address to validate

    Returns:
        ValidateEmailOutput with the normalized address or errors
    """
    normalized = email.strip().lower() if email else ""

    if not normalized:
        return ValidateEmailOutput(
            is_valid=False,
            normalized_email=None,
            errors=[bad_request("Email address is required", field="email")],
        )

    if len(normalized) > MAX_EMAIL_LENGTH:
        return ValidateEmailOutput(
            is_valid=False,
            normalized_email=None,
            errors=[bad_request("Email address is too long", field="email")],
        )

    if not EMAIL_REGEX.match(normalized):
        return ValidateEmailOutput(
            is_valid=False,
            normalized_email=None,
            errors=[bad_request("Invalid email format", field="email")],
        )

    return ValidateEmailOutput(is_valid=True, normalized_email=normalized)


def run_subscribe(inp: SubscribeInput, *, repo: NewsletterRepoPort) -> SubscribeOutput:
    validation = validate_email(inp.email)
    if not validation.is_valid or validation.normalized_email is None:
        return SubscribeOutput(errors=validation.errors, success=False)

    email = validation.normalized_email
    created = repo.create_newsletter_subscription(email)
    if not created:
        logger.debug(f"Newsletter sign-up repeated for {email}")

    return SubscribeOutput(email=email, already_subscribed=not created)


def run(inp: SubscribeInput, *, repo: NewsletterRepoPort) -> SubscribeOutput:
    if isinstance(inp, SubscribeInput):
        return run_subscribe(inp, repo=repo)
    raise TypeError(f"Unknown input type: {type(inp)}")
