"""In-memory news store adapter.

One object owns every collection the API serves: news items, category
feeds, search data, the subscription catalog, user tiers and newsletter
sign-ups. It implements NewsDataSourcePort, UserTierPort,
SubscriptionStorePort and NewsletterRepoPort.

Content collections are fixed at construction. User tiers and newsletter
sign-ups are written from request threads, so every access to them goes
through one lock.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Mapping

from src.domain.blocks import Category, NewsBlock
from src.domain.entities import (
    Article,
    Feed,
    NewsItem,
    RelatedArticles,
    SearchResult,
    Subscription,
    SubscriptionPlan,
    User,
)
from src.domain.pagination import DEFAULT_LIMIT, paginate

logger = logging.getLogger(__name__)


class InMemoryNewsStore:
    """In-memory content and subscription storage - suitable for single-process deployments."""

    def __init__(
        self,
        *,
        news_items: Iterable[NewsItem] = (),
        feeds: Mapping[Category, list[NewsBlock]] | None = None,
        subscriptions: Iterable[Subscription] = (),
        popular_articles: Iterable[NewsBlock] = (),
        popular_topics: Iterable[str] = (),
        topics: Iterable[str] = (),
    ) -> None:
        self._news_items: dict[str, NewsItem] = {item.id: item for item in news_items}
        self._feeds: dict[Category, list[NewsBlock]] = dict(feeds or {})
        self._subscriptions: dict[str, Subscription] = {s.id: s for s in subscriptions}
        self._popular = SearchResult(
            articles=list(popular_articles), topics=list(popular_topics)
        )
        self._topics: list[str] = list(topics)

        self._lock = threading.Lock()
        self._user_tiers: dict[str, SubscriptionPlan] = {}
        self._newsletter_emails: set[str] = set()

    # --- Articles ---

    def get_news_item(self, article_id: str) -> NewsItem | None:
        """Get news item by article id."""
        return self._news_items.get(article_id)

    def get_article(
        self,
        article_id: str,
        *,
        limit: int = DEFAULT_LIMIT,
        offset: int = 0,
        preview: bool = False,
    ) -> Article | None:
        """Get a page of an article's full (or preview) content, None if unknown."""
        item = self.get_news_item(article_id)
        if item is None:
            logger.debug(f"Article not found: {article_id}")
            return None

        content = item.content_preview if preview else item.content
        blocks, total = paginate(content, limit, offset)
        return Article(title=item.title, blocks=blocks, total_blocks=total, url=item.url)

    def is_premium_article(self, article_id: str) -> bool | None:
        item = self.get_news_item(article_id)
        return None if item is None else item.post.is_premium

    def get_related_articles(
        self, article_id: str, *, limit: int = DEFAULT_LIMIT, offset: int = 0
    ) -> RelatedArticles:
        """Get a page of related articles; an unknown id gives an empty page."""
        item = self.get_news_item(article_id)
        if item is None:
            return RelatedArticles.empty()

        blocks, total = paginate(item.related_articles, limit, offset)
        return RelatedArticles(blocks=blocks, total_blocks=total)

    # --- Feeds & Categories ---

    def get_feed(
        self,
        *,
        category: Category = "general",
        limit: int = DEFAULT_LIMIT,
        offset: int = 0,
    ) -> Feed:
        blocks, total = paginate(self._feeds.get(category, []), limit, offset)
        return Feed(blocks=blocks, total_blocks=total)

    def get_categories(self) -> list[Category]:
        return list(self._feeds)

    # --- Search ---

    def get_popular_search(self) -> SearchResult:
        return self._popular

    def get_relevant_search(self, term: str) -> SearchResult:
        """Posts whose title or category contains ``term``, plus matching topics."""
        needle = term.casefold()
        articles: list[NewsBlock] = [
            item.post
            for item in self._news_items.values()
            if needle in item.post.title.casefold() or needle in item.post.category
        ]
        topics = [topic for topic in self._topics if needle in topic.casefold()]
        return SearchResult(articles=articles, topics=topics)

    # --- Subscriptions & Users ---

    def get_subscriptions(self) -> list[Subscription]:
        return list(self._subscriptions.values())

    def create_subscription(self, user_id: str, subscription_id: str) -> bool:
        """Store the catalog entry's tier for a user; unknown ids change nothing."""
        subscription = self._subscriptions.get(subscription_id)
        if subscription is None:
            return False

        with self._lock:
            self._user_tiers[user_id] = subscription.name
        logger.info(f"User {user_id} subscribed to '{subscription.name}'")
        return True

    def get_user(self, user_id: str) -> User:
        with self._lock:
            tier = self._user_tiers.get(user_id, "none")
        return User(id=user_id, subscription=tier)

    # --- Newsletter ---

    def create_newsletter_subscription(self, email: str) -> bool:
        with self._lock:
            if email in self._newsletter_emails:
                return False
            self._newsletter_emails.add(email)
        logger.info(f"Newsletter sign-up recorded for {email}")
        return True

    def clear_users(self) -> None:
        """Clear user tiers and newsletter sign-ups - useful for testing."""
        with self._lock:
            self._user_tiers.clear()
            self._newsletter_emails.clear()
