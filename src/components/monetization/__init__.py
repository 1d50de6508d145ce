"""
Monetization component.

Public API for deciding between full and preview article content.
"""

from .component import check_access, run
from .models import AccessCheckInput, AccessCheckOutput, AccessReason, has_paid_tier
from .ports import UserTierPort

__all__ = [
    # Functions
    "check_access",
    "run",
    # Models
    "AccessCheckInput",
    "AccessCheckOutput",
    "AccessReason",
    "has_paid_tier",
    # Ports
    "UserTierPort",
]
