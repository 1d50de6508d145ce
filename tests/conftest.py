from collections.abc import Iterator
from datetime import UTC, datetime

import pytest
from fastapi.testclient import TestClient

from src.adapters.memory.store import InMemoryNewsStore
from src.api.deps import get_news_store
from src.api.main import app
from src.domain.blocks import NewsBlock, PostSmallBlock, TextParagraphBlock
from src.domain.entities import NewsItem, Subscription, SubscriptionCost

BASIC_SUBSCRIPTION_ID = "sub-basic"
PREMIUM_SUBSCRIPTION_ID = "sub-premium"


def paragraphs(prefix: str, count: int) -> list[NewsBlock]:
    return [TextParagraphBlock(text=f"{prefix}-{n}") for n in range(count)]


def make_item(
    article_id: str,
    *,
    total: int,
    preview: int,
    premium: bool = False,
    related: int = 0,
) -> NewsItem:
    return NewsItem(
        content=paragraphs(f"{article_id}-full", total),
        content_preview=paragraphs(f"{article_id}-preview", preview),
        post=PostSmallBlock(
            id=article_id,
            category="business",
            author="Markets Desk",
            published_at=datetime(2022, 3, 18, tzinfo=UTC),
            title=f"Title of {article_id}",
            is_premium=premium,
        ),
        url=f"https://news.example.com/business/{article_id}",
        related_articles=paragraphs(f"{article_id}-related", related),
    )


@pytest.fixture
def news_store() -> InMemoryNewsStore:
    """
    Store with known content:
    - a1: free, 42 full blocks, 4 preview blocks, 12 related
    - p1: premium, 50 full blocks, 5 preview blocks
    """
    return InMemoryNewsStore(
        news_items=[
            make_item("a1", total=42, preview=4, related=12),
            make_item("p1", total=50, preview=5, premium=True),
        ],
        feeds={
            "general": paragraphs("general", 30),
            "business": paragraphs("business", 3),
        },
        subscriptions=[
            Subscription(
                id=PREMIUM_SUBSCRIPTION_ID,
                name="premium",
                cost=SubscriptionCost(monthly=1499, annual=16200),
                benefits=["Unlimited access"],
            ),
            Subscription(
                id=BASIC_SUBSCRIPTION_ID,
                name="basic",
                cost=SubscriptionCost(monthly=499, annual=5200),
            ),
        ],
        popular_articles=paragraphs("popular", 2),
        popular_topics=["Markets"],
        topics=["Markets", "Mergers"],
    )


@pytest.fixture
def client(news_store: InMemoryNewsStore) -> Iterator[TestClient]:
    """API client served from ``news_store`` instead of the seed content."""
    app.dependency_overrides[get_news_store] = lambda: news_store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def seed_client() -> Iterator[TestClient]:
    """API client served from the seed content built at startup."""
    with TestClient(app) as c:
        yield c


def auth(user_id: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {user_id}"}
