"""
News component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from src.domain.blocks import Category
from src.domain.entities import Article, Feed, RelatedArticles, SearchResult
from src.domain.errors import NewsError
from src.domain.pagination import DEFAULT_LIMIT

# --- Input Models ---


@dataclass(frozen=True)
class GetArticleInput:
    """Input for fetching a page of an article."""

    article_id: str
    limit: int = DEFAULT_LIMIT
    offset: int = 0
    preview: bool = False
    user_id: str | None = None  # None for anonymous requests


@dataclass(frozen=True)
class GetRelatedInput:
    """Input for fetching related articles."""

    article_id: str
    limit: int = DEFAULT_LIMIT
    offset: int = 0


@dataclass(frozen=True)
class GetFeedInput:
    """Input for fetching a category feed."""

    category: str | None = None
    limit: int = DEFAULT_LIMIT
    offset: int = 0


@dataclass(frozen=True)
class GetCategoriesInput:
    pass


@dataclass(frozen=True)
class PopularSearchInput:
    pass


@dataclass(frozen=True)
class RelevantSearchInput:
    term: str | None = None


# --- Output Models ---


@dataclass(frozen=True)
class ArticleOutput:
    """A page of article content and how it was served."""

    article: Article | None = None
    is_premium: bool = False
    is_preview: bool = False
    errors: list[NewsError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class RelatedArticlesOutput:
    related: RelatedArticles = field(default_factory=RelatedArticles.empty)
    errors: list[NewsError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class FeedOutput:
    feed: Feed | None = None
    errors: list[NewsError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class CategoriesOutput:
    categories: list[Category] = field(default_factory=list)
    errors: list[NewsError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class SearchOutput:
    result: SearchResult | None = None
    errors: list[NewsError] = field(default_factory=list)
    success: bool = True
