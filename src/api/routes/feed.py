from typing import Annotated

from fastapi import APIRouter, Depends, Query

from src.adapters.memory.store import InMemoryNewsStore
from src.api.deps import get_news_store, get_rules, raise_for_errors
from src.api.schemas import FeedResponse
from src.components.news import GetFeedInput, run_get_feed
from src.domain.blocks import encode_blocks
from src.rules.models import Rules

router = APIRouter()


@router.get("", response_model=FeedResponse)
def get_feed(
    category: str | None = None,
    limit: Annotated[int | None, Query(ge=0)] = None,
    offset: Annotated[int, Query(ge=0)] = 0,
    store: InMemoryNewsStore = Depends(get_news_store),
    rules: Rules = Depends(get_rules),
) -> FeedResponse:
    """Get a page of the feed for a category."""
    inp = GetFeedInput(
        category=category or rules.feed.default_category,
        limit=rules.pagination.default_limit if limit is None else limit,
        offset=offset,
    )
    result = run_get_feed(inp, data_source=store)

    if not result.success or result.feed is None:
        raise_for_errors(result.errors)

    return FeedResponse(
        feed=encode_blocks(result.feed.blocks),
        total_count=result.feed.total_blocks,
    )
