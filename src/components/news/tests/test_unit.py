"""
Unit tests for news component.

Tests:
- Article pages honour offset/limit and the access decision
- Unknown article ids: not_found on direct fetch, empty related articles
- Feed category validation and default
- Relevant search requires a term
"""

from datetime import UTC, datetime

import pytest

from src.adapters.memory.store import InMemoryNewsStore
from src.components.news import (
    ArticleOutput,
    CategoriesOutput,
    GetArticleInput,
    GetCategoriesInput,
    GetFeedInput,
    GetRelatedInput,
    PopularSearchInput,
    RelevantSearchInput,
    run,
    run_get_article,
    run_get_feed,
    run_get_related,
    run_relevant_search,
)
from src.domain.blocks import NewsBlock, PostSmallBlock, TextParagraphBlock
from src.domain.entities import NewsItem, Subscription, SubscriptionCost

# --- Fixtures ---


def _paragraphs(prefix: str, count: int) -> list[NewsBlock]:
    return [TextParagraphBlock(text=f"{prefix}-{n}") for n in range(count)]


def _item(
    article_id: str,
    *,
    total: int,
    preview: int,
    premium: bool = False,
    related: int = 0,
    title: str | None = None,
) -> NewsItem:
    return NewsItem(
        content=_paragraphs(f"{article_id}-full", total),
        content_preview=_paragraphs(f"{article_id}-preview", preview),
        post=PostSmallBlock(
            id=article_id,
            category="technology",
            author="Desk",
            published_at=datetime(2022, 3, 9, tzinfo=UTC),
            title=title or f"Article {article_id}",
            is_premium=premium,
        ),
        url=f"https://news.example.com/{article_id}",
        related_articles=_paragraphs(f"{article_id}-related", related),
    )


@pytest.fixture
def store() -> InMemoryNewsStore:
    s = InMemoryNewsStore(
        news_items=[
            _item("a1", total=42, preview=3, related=4),
            _item("p1", total=50, preview=5, premium=True, title="Chip exports"),
        ],
        feeds={"general": _paragraphs("general", 25), "sports": _paragraphs("sports", 2)},
        subscriptions=[
            Subscription(
                id="sub-basic",
                name="basic",
                cost=SubscriptionCost(monthly=499, annual=5200),
            )
        ],
        topics=["Chips", "Elections"],
    )
    s.create_subscription("basic-user", "sub-basic")
    return s


# --- Article Tests ---


class TestGetArticle:
    def test_pages_free_article(self, store: InMemoryNewsStore) -> None:
        """42 blocks, limit=10, offset=35 -> 7 blocks, totalCount 42."""
        result = run_get_article(
            GetArticleInput(article_id="a1", limit=10, offset=35), data_source=store, users=store
        )
        assert result.success is True
        assert result.article is not None
        assert len(result.article.blocks) == 7
        assert result.article.total_blocks == 42
        assert result.is_premium is False
        assert result.is_preview is False

    def test_premium_article_anonymous_gets_preview(self, store: InMemoryNewsStore) -> None:
        result = run_get_article(GetArticleInput(article_id="p1"), data_source=store, users=store)
        assert result.article is not None
        assert len(result.article.blocks) == 5
        assert result.article.total_blocks == 5
        assert result.is_preview is True
        assert result.is_premium is True

    def test_premium_article_subscriber_gets_full(self, store: InMemoryNewsStore) -> None:
        result = run_get_article(
            GetArticleInput(article_id="p1", user_id="basic-user"), data_source=store, users=store
        )
        assert result.article is not None
        assert result.article.total_blocks == 50
        assert len(result.article.blocks) == 20
        assert result.is_preview is False

    def test_premium_article_user_without_tier_gets_preview(
        self, store: InMemoryNewsStore
    ) -> None:
        result = run_get_article(
            GetArticleInput(article_id="p1", user_id="new-user"), data_source=store, users=store
        )
        assert result.article is not None
        assert result.article.total_blocks == 5
        assert result.is_preview is True

    def test_preview_flag_forces_preview_on_free_article(self, store: InMemoryNewsStore) -> None:
        result = run_get_article(
            GetArticleInput(article_id="a1", preview=True), data_source=store, users=store
        )
        assert result.article is not None
        assert result.article.total_blocks == 3
        assert result.is_preview is True

    def test_offset_past_end_returns_empty_page(self, store: InMemoryNewsStore) -> None:
        result = run_get_article(
            GetArticleInput(article_id="a1", offset=100), data_source=store, users=store
        )
        assert result.article is not None
        assert result.article.blocks == []
        assert result.article.total_blocks == 42

    def test_unknown_article_is_not_found(self, store: InMemoryNewsStore) -> None:
        result = run_get_article(
            GetArticleInput(article_id="missing"), data_source=store, users=store
        )
        assert result.success is False
        assert result.article is None
        assert result.errors[0].code == "not_found"

    def test_article_carries_title_and_url(self, store: InMemoryNewsStore) -> None:
        result = run_get_article(GetArticleInput(article_id="p1"), data_source=store, users=store)
        assert result.article is not None
        assert result.article.title == "Chip exports"
        assert result.article.url == "https://news.example.com/p1"


# --- Related Articles Tests ---


class TestGetRelated:
    def test_pages_related_articles(self, store: InMemoryNewsStore) -> None:
        result = run_get_related(
            GetRelatedInput(article_id="a1", limit=3, offset=2), data_source=store
        )
        assert result.success is True
        assert len(result.related.blocks) == 2
        assert result.related.total_blocks == 4

    def test_unknown_article_is_empty_success(self, store: InMemoryNewsStore) -> None:
        result = run_get_related(GetRelatedInput(article_id="missing"), data_source=store)
        assert result.success is True
        assert result.related.blocks == []
        assert result.related.total_blocks == 0


# --- Feed Tests ---


class TestGetFeed:
    def test_default_category_is_general(self, store: InMemoryNewsStore) -> None:
        result = run_get_feed(GetFeedInput(), data_source=store)
        assert result.feed is not None
        assert result.feed.total_blocks == 25
        assert len(result.feed.blocks) == 20

    def test_category_feed(self, store: InMemoryNewsStore) -> None:
        result = run_get_feed(GetFeedInput(category="sports"), data_source=store)
        assert result.feed is not None
        assert result.feed.total_blocks == 2

    def test_known_category_without_feed_is_empty(self, store: InMemoryNewsStore) -> None:
        result = run_get_feed(GetFeedInput(category="health"), data_source=store)
        assert result.success is True
        assert result.feed is not None
        assert result.feed.blocks == []
        assert result.feed.total_blocks == 0

    def test_unknown_category_is_bad_request(self, store: InMemoryNewsStore) -> None:
        result = run_get_feed(GetFeedInput(category="gossip"), data_source=store)
        assert result.success is False
        assert result.errors[0].code == "bad_request"
        assert result.errors[0].field == "category"


# --- Search Tests ---


class TestRelevantSearch:
    def test_blank_term_is_bad_request(self, store: InMemoryNewsStore) -> None:
        result = run_relevant_search(RelevantSearchInput(term="  "), data_source=store)
        assert result.success is False
        assert result.errors[0].code == "bad_request"

    def test_matches_titles_and_topics(self, store: InMemoryNewsStore) -> None:
        result = run_relevant_search(RelevantSearchInput(term="chip"), data_source=store)
        assert result.result is not None
        assert [a.id for a in result.result.articles] == ["p1"]  # type: ignore[attr-defined]
        assert result.result.topics == ["Chips"]


# --- Dispatch Tests ---


class TestRun:
    def test_dispatches_by_input_type(self, store: InMemoryNewsStore) -> None:
        assert isinstance(
            run(GetArticleInput(article_id="a1"), data_source=store, users=store), ArticleOutput
        )
        categories = run(GetCategoriesInput(), data_source=store)
        assert isinstance(categories, CategoriesOutput)
        assert categories.categories == ["general", "sports"]
        assert run(PopularSearchInput(), data_source=store).success is True

    def test_article_requires_user_port(self, store: InMemoryNewsStore) -> None:
        with pytest.raises(ValueError):
            run(GetArticleInput(article_id="a1"), data_source=store)

    def test_unknown_input_type_raises(self, store: InMemoryNewsStore) -> None:
        with pytest.raises(TypeError):
            run(object(), data_source=store)  # type: ignore[arg-type]
