from fastapi import APIRouter, Depends

from src.adapters.memory.store import InMemoryNewsStore
from src.api.deps import get_news_store, raise_for_errors
from src.api.schemas import SearchResponse
from src.components.news import (
    PopularSearchInput,
    RelevantSearchInput,
    run_popular_search,
    run_relevant_search,
)
from src.domain.blocks import encode_blocks

router = APIRouter()


@router.get("/popular", response_model=SearchResponse)
def popular_search(store: InMemoryNewsStore = Depends(get_news_store)) -> SearchResponse:
    """Popular articles and topics."""
    result = run_popular_search(PopularSearchInput(), data_source=store)
    if result.result is None:
        raise_for_errors(result.errors)

    return SearchResponse(
        articles=encode_blocks(result.result.articles),
        topics=result.result.topics,
    )


@router.get("/relevant", response_model=SearchResponse)
def relevant_search(
    q: str | None = None,
    store: InMemoryNewsStore = Depends(get_news_store),
) -> SearchResponse:
    """Articles and topics matching ``q``; a missing term is a 400."""
    result = run_relevant_search(RelevantSearchInput(term=q), data_source=store)
    if not result.success or result.result is None:
        raise_for_errors(result.errors)

    return SearchResponse(
        articles=encode_blocks(result.result.articles),
        topics=result.result.topics,
    )
