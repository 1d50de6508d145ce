"""
Unit tests for subscriptions component.

Tests:
- Catalog listing
- Creation writes the catalog tier; unknown ids are a silent no-op
- Anonymous and missing-parameter requests are bad requests
- Users that never subscribed have tier "none"
"""

import pytest

from src.adapters.memory.store import InMemoryNewsStore
from src.components.subscriptions import (
    CreateSubscriptionInput,
    GetUserInput,
    ListSubscriptionsInput,
    SubscriptionListOutput,
    run,
    run_create_subscription,
    run_get_user,
    run_list_subscriptions,
)
from src.domain.entities import Subscription, SubscriptionCost

# --- Fixtures ---


@pytest.fixture
def store() -> InMemoryNewsStore:
    return InMemoryNewsStore(
        subscriptions=[
            Subscription(
                id="sub-premium",
                name="premium",
                cost=SubscriptionCost(monthly=1499, annual=16200),
                benefits=["Everything"],
            ),
            Subscription(
                id="sub-basic",
                name="basic",
                cost=SubscriptionCost(monthly=499, annual=5200),
            ),
        ]
    )


# --- Listing ---


class TestListSubscriptions:
    def test_lists_catalog_in_order(self, store: InMemoryNewsStore) -> None:
        result = run_list_subscriptions(ListSubscriptionsInput(), store=store)
        assert [s.id for s in result.subscriptions] == ["sub-premium", "sub-basic"]
        assert result.subscriptions[0].cost.annual == 16200


# --- Creation ---


class TestCreateSubscription:
    def test_writes_catalog_tier(self, store: InMemoryNewsStore) -> None:
        result = run_create_subscription(
            CreateSubscriptionInput(user_id="u1", subscription_id="sub-basic"), store=store
        )
        assert result.success is True
        assert result.applied is True
        assert store.get_user("u1").subscription == "basic"

    def test_overwrites_previous_tier(self, store: InMemoryNewsStore) -> None:
        run_create_subscription(
            CreateSubscriptionInput(user_id="u1", subscription_id="sub-basic"), store=store
        )
        run_create_subscription(
            CreateSubscriptionInput(user_id="u1", subscription_id="sub-premium"), store=store
        )
        assert store.get_user("u1").subscription == "premium"

    def test_unknown_subscription_leaves_tier_unchanged(self, store: InMemoryNewsStore) -> None:
        run_create_subscription(
            CreateSubscriptionInput(user_id="u1", subscription_id="sub-basic"), store=store
        )
        result = run_create_subscription(
            CreateSubscriptionInput(user_id="u1", subscription_id="does-not-exist"), store=store
        )
        assert result.success is True
        assert result.applied is False
        assert store.get_user("u1").subscription == "basic"

    def test_unknown_subscription_does_not_create_user_tier(
        self, store: InMemoryNewsStore
    ) -> None:
        run_create_subscription(
            CreateSubscriptionInput(user_id="u2", subscription_id="does-not-exist"), store=store
        )
        assert store.get_user("u2").subscription == "none"

    def test_anonymous_is_bad_request(self, store: InMemoryNewsStore) -> None:
        result = run_create_subscription(
            CreateSubscriptionInput(user_id=None, subscription_id="sub-basic"), store=store
        )
        assert result.success is False
        assert result.errors[0].code == "bad_request"

    @pytest.mark.parametrize("subscription_id", [None, ""])
    def test_missing_subscription_id_is_bad_request(
        self, store: InMemoryNewsStore, subscription_id: str | None
    ) -> None:
        result = run_create_subscription(
            CreateSubscriptionInput(user_id="u1", subscription_id=subscription_id), store=store
        )
        assert result.success is False
        assert result.errors[0].field == "subscriptionId"


# --- Users ---


class TestGetUser:
    def test_unknown_user_has_no_subscription(self, store: InMemoryNewsStore) -> None:
        result = run_get_user(GetUserInput(user_id="u1"), store=store)
        assert result.user is not None
        assert result.user.id == "u1"
        assert result.user.subscription == "none"

    def test_anonymous_is_bad_request(self, store: InMemoryNewsStore) -> None:
        result = run_get_user(GetUserInput(user_id=None), store=store)
        assert result.success is False
        assert result.user is None


class TestRun:
    def test_dispatches_by_input_type(self, store: InMemoryNewsStore) -> None:
        assert isinstance(run(ListSubscriptionsInput(), store=store), SubscriptionListOutput)

    def test_unknown_input_type_raises(self, store: InMemoryNewsStore) -> None:
        with pytest.raises(TypeError):
            run("nope", store=store)  # type: ignore[arg-type]
