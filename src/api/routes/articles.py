from typing import Annotated

from fastapi import APIRouter, Depends, Query

from src.adapters.memory.store import InMemoryNewsStore
from src.api.auth_utils import RequestUser
from src.api.deps import get_news_store, get_request_user, get_rules, raise_for_errors
from src.api.schemas import ArticleResponse, RelatedArticlesResponse
from src.components.news import (
    GetArticleInput,
    GetRelatedInput,
    run_get_article,
    run_get_related,
)
from src.domain.blocks import encode_blocks
from src.rules.models import Rules

router = APIRouter()


@router.get("/{article_id}", response_model=ArticleResponse)
def get_article(
    article_id: str,
    limit: Annotated[int | None, Query(ge=0)] = None,
    offset: Annotated[int, Query(ge=0)] = 0,
    preview: bool = False,
    user: RequestUser = Depends(get_request_user),
    store: InMemoryNewsStore = Depends(get_news_store),
    rules: Rules = Depends(get_rules),
) -> ArticleResponse:
    """Get a page of an article; premium articles fall back to the preview."""
    inp = GetArticleInput(
        article_id=article_id,
        limit=rules.pagination.default_limit if limit is None else limit,
        offset=offset,
        preview=preview,
        user_id=user.id,
    )
    result = run_get_article(inp, data_source=store, users=store)

    if not result.success or result.article is None:
        raise_for_errors(result.errors, "Article not found")

    article = result.article
    return ArticleResponse(
        title=article.title,
        content=encode_blocks(article.blocks),
        total_count=article.total_blocks,
        url=article.url,
        is_premium=result.is_premium,
        is_preview=result.is_preview,
    )


@router.get("/{article_id}/related", response_model=RelatedArticlesResponse)
def get_related_articles(
    article_id: str,
    limit: Annotated[int | None, Query(ge=0)] = None,
    offset: Annotated[int, Query(ge=0)] = 0,
    store: InMemoryNewsStore = Depends(get_news_store),
    rules: Rules = Depends(get_rules),
) -> RelatedArticlesResponse:
    """
    Get related articles for an article.

    Unknown article ids return an empty list rather than 404.
    """
    inp = GetRelatedInput(
        article_id=article_id,
        limit=rules.pagination.default_limit if limit is None else limit,
        offset=offset,
    )
    result = run_get_related(inp, data_source=store)

    return RelatedArticlesResponse(
        related_articles=encode_blocks(result.related.blocks),
        total_count=result.related.total_blocks,
    )
