"""
News component - article, feed, category and search retrieval.

Article content is paginated by the data source; this component decides
which list (full or preview) a request may see and maps absent data to
errors. Related articles for an unknown id are an empty success, while a
direct article fetch for an unknown id is ``not_found``.
"""

from __future__ import annotations

import logging
from typing import get_args

from src.components.monetization import AccessCheckInput, UserTierPort
from src.components.monetization import run as run_access_check
from src.domain.blocks import Category
from src.domain.errors import bad_request, not_found

from .models import (
    ArticleOutput,
    CategoriesOutput,
    FeedOutput,
    GetArticleInput,
    GetCategoriesInput,
    GetFeedInput,
    GetRelatedInput,
    PopularSearchInput,
    RelatedArticlesOutput,
    RelevantSearchInput,
    SearchOutput,
)
from .ports import NewsDataSourcePort

logger = logging.getLogger(__name__)

CATEGORIES: tuple[Category, ...] = get_args(Category)
DEFAULT_CATEGORY: Category = "general"


# --- Component Entry Points ---


def run_get_article(
    inp: GetArticleInput,
    *,
    data_source: NewsDataSourcePort,
    users: UserTierPort,
) -> ArticleOutput:
    """
    Get a page of an article, full or preview depending on access.

    Args:
        inp: Article id, pagination and request identity.
        data_source: News data source port.
        users: Port resolving the requester's subscription tier.

    Returns:
        ArticleOutput with the page, or a not_found error.
    """
    is_premium = data_source.is_premium_article(inp.article_id)
    if is_premium is None:
        return ArticleOutput(
            errors=[not_found(f"Article '{inp.article_id}' not found", field="article_id")],
            success=False,
        )

    access = run_access_check(
        AccessCheckInput(
            preview_requested=inp.preview,
            is_premium=is_premium,
            user_id=inp.user_id,
        ),
        users=users,
    )

    article = data_source.get_article(
        inp.article_id,
        limit=inp.limit,
        offset=inp.offset,
        preview=access.is_preview,
    )
    if article is None:
        return ArticleOutput(
            errors=[not_found(f"Article '{inp.article_id}' not found", field="article_id")],
            success=False,
        )

    return ArticleOutput(
        article=article,
        is_premium=is_premium,
        is_preview=access.is_preview,
    )


def run_get_related(
    inp: GetRelatedInput,
    *,
    data_source: NewsDataSourcePort,
) -> RelatedArticlesOutput:
    """Get a page of related articles; unknown ids yield an empty page."""
    related = data_source.get_related_articles(
        inp.article_id, limit=inp.limit, offset=inp.offset
    )
    return RelatedArticlesOutput(related=related)


def run_get_feed(
    inp: GetFeedInput,
    *,
    data_source: NewsDataSourcePort,
) -> FeedOutput:
    """Get a page of the feed for a category (default "general")."""
    category = inp.category or DEFAULT_CATEGORY
    if category not in CATEGORIES:
        return FeedOutput(
            errors=[bad_request(f"Unknown category '{category}'", field="category")],
            success=False,
        )

    feed = data_source.get_feed(category=category, limit=inp.limit, offset=inp.offset)
    return FeedOutput(feed=feed)


def run_get_categories(
    inp: GetCategoriesInput,
    *,
    data_source: NewsDataSourcePort,
) -> CategoriesOutput:
    return CategoriesOutput(categories=data_source.get_categories())


def run_popular_search(
    inp: PopularSearchInput,
    *,
    data_source: NewsDataSourcePort,
) -> SearchOutput:
    return SearchOutput(result=data_source.get_popular_search())


def run_relevant_search(
    inp: RelevantSearchInput,
    *,
    data_source: NewsDataSourcePort,
) -> SearchOutput:
    """Search articles and topics; a blank term is a bad request."""
    term = (inp.term or "").strip()
    if not term:
        return SearchOutput(
            errors=[bad_request("Search term is required", field="q")],
            success=False,
        )

    result = data_source.get_relevant_search(term)
    logger.debug(
        f"Relevant search: term={term!r}, articles={len(result.articles)}, "
        f"topics={len(result.topics)}"
    )
    return SearchOutput(result=result)


def run(
    inp: (
        GetArticleInput
        | GetRelatedInput
        | GetFeedInput
        | GetCategoriesInput
        | PopularSearchInput
        | RelevantSearchInput
    ),
    *,
    data_source: NewsDataSourcePort,
    users: UserTierPort | None = None,
) -> ArticleOutput | RelatedArticlesOutput | FeedOutput | CategoriesOutput | SearchOutput:
    """
    Main entry point for the news component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, GetArticleInput):
        if users is None:
            raise ValueError("UserTierPort is required for article reads")
        return run_get_article(inp, data_source=data_source, users=users)

    elif isinstance(inp, GetRelatedInput):
        return run_get_related(inp, data_source=data_source)

    elif isinstance(inp, GetFeedInput):
        return run_get_feed(inp, data_source=data_source)

    elif isinstance(inp, GetCategoriesInput):
        return run_get_categories(inp, data_source=data_source)

    elif isinstance(inp, PopularSearchInput):
        return run_popular_search(inp, data_source=data_source)

    elif isinstance(inp, RelevantSearchInput):
        return run_relevant_search(inp, data_source=data_source)

    else:
        raise TypeError(f"Unknown input type: {type(inp)}")
