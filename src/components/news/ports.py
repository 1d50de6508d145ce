"""
News component port definitions.

The data source owns articles, feeds and search data. User tiers are
resolved through the monetization component's UserTierPort.
"""

from __future__ import annotations

from typing import Protocol

from src.domain.blocks import Category
from src.domain.entities import Article, Feed, NewsItem, RelatedArticles, SearchResult


class NewsDataSourcePort(Protocol):
    """Read-only access to news content."""

    def get_news_item(self, article_id: str) -> NewsItem | None:
        """Get the item for an article id."""
        ...

    def get_article(
        self,
        article_id: str,
        *,
        limit: int = 20,
        offset: int = 0,
        preview: bool = False,
    ) -> Article | None:
        """Get a page of an article's full or preview content."""
        ...

    def is_premium_article(self, article_id: str) -> bool | None:
        """Premium flag of an article, None if the id is unknown."""
        ...

    def get_related_articles(
        self, article_id: str, *, limit: int = 20, offset: int = 0
    ) -> RelatedArticles:
        """Get a page of related articles (empty for an unknown id)."""
        ...

    def get_feed(
        self, *, category: Category = "general", limit: int = 20, offset: int = 0
    ) -> Feed:
        """Get a page of a category feed."""
        ...

    def get_categories(self) -> list[Category]:
        """Categories that have a feed."""
        ...

    def get_popular_search(self) -> SearchResult:
        """Popular articles and topics."""
        ...

    def get_relevant_search(self, term: str) -> SearchResult:
        """Articles and topics matching a search term."""
        ...
