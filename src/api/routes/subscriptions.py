from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response, status

from src.adapters.memory.store import InMemoryNewsStore
from src.api.auth_utils import RequestUser
from src.api.deps import get_news_store, get_request_user, raise_for_errors
from src.api.schemas import SubscriptionModel, SubscriptionsResponse
from src.components.subscriptions import (
    CreateSubscriptionInput,
    ListSubscriptionsInput,
    run_create_subscription,
    run_list_subscriptions,
)

router = APIRouter()


@router.get("", response_model=SubscriptionsResponse)
def list_subscriptions(
    store: InMemoryNewsStore = Depends(get_news_store),
) -> SubscriptionsResponse:
    """The subscription catalog."""
    result = run_list_subscriptions(ListSubscriptionsInput(), store=store)
    return SubscriptionsResponse(
        subscriptions=[
            SubscriptionModel.model_validate(s.model_dump()) for s in result.subscriptions
        ]
    )


@router.post("", status_code=status.HTTP_201_CREATED, response_class=Response)
def create_subscription(
    subscription_id: Annotated[str | None, Query(alias="subscriptionId")] = None,
    user: RequestUser = Depends(get_request_user),
    store: InMemoryNewsStore = Depends(get_news_store),
) -> Response:
    """Subscribe the caller; unknown subscription ids are accepted and ignored."""
    inp = CreateSubscriptionInput(user_id=user.id, subscription_id=subscription_id)
    result = run_create_subscription(inp, store=store)

    if not result.success:
        raise_for_errors(result.errors)

    return Response(status_code=status.HTTP_201_CREATED)
