"""
Subscriptions component - subscription catalog and user tiers.
"""

from .component import (
    run,
    run_create_subscription,
    run_get_user,
    run_list_subscriptions,
)
from .models import (
    CreateSubscriptionInput,
    CreateSubscriptionOutput,
    GetUserInput,
    ListSubscriptionsInput,
    SubscriptionListOutput,
    UserOutput,
)
from .ports import SubscriptionStorePort

__all__ = [
    # Entry points
    "run",
    "run_create_subscription",
    "run_get_user",
    "run_list_subscriptions",
    # Models
    "CreateSubscriptionInput",
    "CreateSubscriptionOutput",
    "GetUserInput",
    "ListSubscriptionsInput",
    "SubscriptionListOutput",
    "UserOutput",
    # Ports
    "SubscriptionStorePort",
]
