"""
Subscriptions component - catalog listing, subscription creation, user lookup.

Creating a subscription with an id missing from the catalog is a silent
no-op: the call succeeds and the user's stored tier is left unchanged.
Operations acting on "the requesting user" reject anonymous requests.
"""

from __future__ import annotations

import logging

from src.domain.errors import bad_request

from .models import (
    CreateSubscriptionInput,
    CreateSubscriptionOutput,
    GetUserInput,
    ListSubscriptionsInput,
    SubscriptionListOutput,
    UserOutput,
)
from .ports import SubscriptionStorePort

logger = logging.getLogger(__name__)

ANONYMOUS_MESSAGE = "Request must be authenticated"


def run_list_subscriptions(
    inp: ListSubscriptionsInput,
    *,
    store: SubscriptionStorePort,
) -> SubscriptionListOutput:
    return SubscriptionListOutput(subscriptions=store.get_subscriptions())


def run_create_subscription(
    inp: CreateSubscriptionInput,
    *,
    store: SubscriptionStorePort,
) -> CreateSubscriptionOutput:
    """
    Subscribe the requesting user to a catalog entry.

    Args:
        inp: Requesting user id and subscription id.
        store: Subscription store port.

    Returns:
        CreateSubscriptionOutput; bad_request when the user is anonymous
        or the subscription id is missing.
    """
    if inp.user_id is None:
        return CreateSubscriptionOutput(
            errors=[bad_request(ANONYMOUS_MESSAGE, field="authorization")],
            success=False,
        )

    if not inp.subscription_id:
        return CreateSubscriptionOutput(
            errors=[bad_request("subscriptionId is required", field="subscriptionId")],
            success=False,
        )

    applied = store.create_subscription(inp.user_id, inp.subscription_id)
    if not applied:
        logger.info(
            f"Ignoring unknown subscription '{inp.subscription_id}' for user {inp.user_id}"
        )
    return CreateSubscriptionOutput(applied=applied)


def run_get_user(inp: GetUserInput, *, store: SubscriptionStorePort) -> UserOutput:
    """Get the requesting user with its tier; anonymous requests are rejected."""
    if inp.user_id is None:
        return UserOutput(
            errors=[bad_request(ANONYMOUS_MESSAGE, field="authorization")],
            success=False,
        )

    return UserOutput(user=store.get_user(inp.user_id))


def run(
    inp: ListSubscriptionsInput | CreateSubscriptionInput | GetUserInput,
    *,
    store: SubscriptionStorePort,
) -> SubscriptionListOutput | CreateSubscriptionOutput | UserOutput:
    """
    Main entry point for the subscriptions component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, ListSubscriptionsInput):
        return run_list_subscriptions(inp, store=store)

    elif isinstance(inp, CreateSubscriptionInput):
        return run_create_subscription(inp, store=store)

    elif isinstance(inp, GetUserInput):
        return run_get_user(inp, store=store)

    else:
        raise TypeError(f"Unknown input type: {type(inp)}")
