"""
Newsletter component.

Public API for newsletter e-mail sign-up.
"""

from .component import EMAIL_REGEX, run, run_subscribe, validate_email
from .models import SubscribeInput, SubscribeOutput, ValidateEmailOutput
from .ports import NewsletterRepoPort

__all__ = [
    "EMAIL_REGEX",
    "run",
    "run_subscribe",
    "validate_email",
    "SubscribeInput",
    "SubscribeOutput",
    "ValidateEmailOutput",
    "NewsletterRepoPort",
]
