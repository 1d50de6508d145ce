"""
Monetization component.

Pure decision between full and preview article content.

Decision table, evaluated in order:
1. preview requested             -> preview
2. article is not premium        -> full
3. premium, anonymous visitor    -> preview
4. premium, tier "none"          -> preview
5. premium, any other tier       -> full
"""

from __future__ import annotations

import logging

from src.domain.entities import SubscriptionPlan

from .models import AccessCheckInput, AccessCheckOutput, has_paid_tier
from .ports import UserTierPort

logger = logging.getLogger(__name__)


# --- Pure Functions ---


def check_access(
    *,
    preview_requested: bool,
    is_premium: bool,
    user_id: str | None,
    tier: SubscriptionPlan | None = None,
) -> AccessCheckOutput:
    """
    Decide whether a request gets full or preview content.

    Args:
        preview_requested: Client explicitly asked for the preview
        is_premium: Article premium flag
        user_id: Request identity, None for anonymous
        tier: Subscription tier of ``user_id`` (ignored when anonymous)

    Returns:
        AccessCheckOutput with the decision and the rule that made it
    """
    if preview_requested:
        return AccessCheckOutput(has_full_access=False, reason="preview_requested")

    if not is_premium:
        return AccessCheckOutput(has_full_access=True, reason="free_article")

    if user_id is None:
        return AccessCheckOutput(has_full_access=False, reason="anonymous_visitor")

    if not has_paid_tier(tier):
        return AccessCheckOutput(has_full_access=False, reason="no_subscription", tier=tier)

    return AccessCheckOutput(has_full_access=True, reason="subscriber", tier=tier)


# --- Run Function (Atomic Component Pattern) ---


def run(inp: AccessCheckInput, *, users: UserTierPort) -> AccessCheckOutput:
    """
    Resolve access for a request.

    The tier is only looked up when the decision depends on it: premium
    content, no explicit preview, and a known identity.
    """
    if not isinstance(inp, AccessCheckInput):
        raise TypeError(f"Unknown input type: {type(inp)}")

    tier: SubscriptionPlan | None = None
    if not inp.preview_requested and inp.is_premium and inp.user_id is not None:
        tier = users.get_user(inp.user_id).subscription

    result = check_access(
        preview_requested=inp.preview_requested,
        is_premium=inp.is_premium,
        user_id=inp.user_id,
        tier=tier,
    )
    logger.debug(
        f"Access check: user_id={inp.user_id}, premium={inp.is_premium}, "
        f"full={result.has_full_access}, reason={result.reason}"
    )
    return result
