from fastapi import APIRouter, Depends, Response, status

from src.adapters.memory.store import InMemoryNewsStore
from src.api.deps import get_news_store, raise_for_errors
from src.api.schemas import NewsletterSubscriptionRequest
from src.components.newsletter import SubscribeInput, run_subscribe

router = APIRouter()


@router.post("/subscription", status_code=status.HTTP_201_CREATED, response_class=Response)
def create_newsletter_subscription(
    req: NewsletterSubscriptionRequest,
    store: InMemoryNewsStore = Depends(get_news_store),
) -> Response:
    """Sign an e-mail address up to the newsletter (idempotent)."""
    result = run_subscribe(SubscribeInput(email=req.email), repo=store)
    if not result.success:
        raise_for_errors(result.errors)

    return Response(status_code=status.HTTP_201_CREATED)
