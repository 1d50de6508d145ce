"""Static seed content for the in-memory news store.

Builds a small, self-consistent newsroom: a handful of articles across
post categories, a feed per category plus the mixed "general" feed, and
popular/relevant search data. Every related-article and navigation action
points at an article that exists.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import UTC, datetime

from src.adapters.memory.store import InMemoryNewsStore
from src.domain.blocks import (
    ArticleIntroductionBlock,
    BannerAdBlock,
    Category,
    DividerHorizontalBlock,
    ImageBlock,
    NavigateToArticleAction,
    NavigateToFeedCategoryAction,
    NavigateToSlideshowAction,
    NewsBlock,
    NewsletterBlock,
    PostCategory,
    PostGridGroupBlock,
    PostGridTileBlock,
    PostLargeBlock,
    PostMediumBlock,
    PostSmallBlock,
    SectionHeaderBlock,
    SlideBlock,
    SlideshowBlock,
    SlideshowIntroductionBlock,
    SpacerBlock,
    TextCaptionBlock,
    TextHeadlineBlock,
    TextLeadParagraphBlock,
    TextParagraphBlock,
    TrendingStoryBlock,
    VideoIntroductionBlock,
)
from src.domain.entities import NewsItem, Subscription

BASE_URL = "https://news.example.com"
PREVIEW_BLOCKS = 3


@dataclass(frozen=True)
class _Story:
    id: str
    category: PostCategory
    author: str
    published_at: datetime
    title: str
    description: str
    image_url: str
    is_premium: bool = False
    paragraphs: int = 6


STORIES: tuple[_Story, ...] = (
    _Story(
        id="5c47495a-608b-4e8b-a7f0-642a02594888",
        category="technology",
        author="CNN",
        published_at=datetime(2022, 3, 9, tzinfo=UTC),
        title="Nvidia and AMD chips restricted from sale to some overseas markets",
        description="New export rules tighten the supply of high-end accelerators.",
        image_url=f"{BASE_URL}/images/chips.jpg",
    ),
    _Story(
        id="b1fc2839-b5ec-4a49-85e3-4a2a8bb7e5e0",
        category="sports",
        author="Sports Desk",
        published_at=datetime(2022, 3, 12, tzinfo=UTC),
        title="Underdogs clinch the title in a final-minute comeback",
        description="A stoppage-time winner capped a remarkable season.",
        image_url=f"{BASE_URL}/images/final.jpg",
    ),
    _Story(
        id="82c49bf1-946d-4920-a801-302291f367b5",
        category="health",
        author="Health Desk",
        published_at=datetime(2022, 3, 17, tzinfo=UTC),
        title="What a decade of sleep research says about shift work",
        description="Long-term studies point to measurable effects on metabolism.",
        image_url=f"{BASE_URL}/images/sleep.jpg",
        is_premium=True,
        paragraphs=10,
    ),
    _Story(
        id="4f3b7a7e-2a7b-4a3c-9d1f-6e2b8c5d9a10",
        category="business",
        author="Markets Desk",
        published_at=datetime(2022, 3, 18, tzinfo=UTC),
        title="Central banks signal a slower pace of rate rises",
        description="Officials weigh cooling inflation against a softer labor market.",
        image_url=f"{BASE_URL}/images/banks.jpg",
        is_premium=True,
        paragraphs=8,
    ),
    _Story(
        id="e9a3c2d1-7b6f-4e5a-8c9d-0f1e2d3c4b5a",
        category="science",
        author="Science Desk",
        published_at=datetime(2022, 3, 21, tzinfo=UTC),
        title="Telescope images reveal a galaxy older than expected",
        description="The find pushes back estimates of early star formation.",
        image_url=f"{BASE_URL}/images/galaxy.jpg",
    ),
    _Story(
        id="0d6c5b4a-3f2e-4d1c-9b8a-7e6f5d4c3b2a",
        category="entertainment",
        author="Culture Desk",
        published_at=datetime(2022, 3, 25, tzinfo=UTC),
        title="A quiet film festival hit becomes the year's surprise blockbuster",
        description="Word of mouth carried a small production to record openings.",
        image_url=f"{BASE_URL}/images/festival.jpg",
    ),
)

POPULAR_TOPICS = ("Ukraine", "Interest rates", "Champions League", "AI chips", "Sleep")
TOPICS = POPULAR_TOPICS + ("Telescopes", "Box office", "Inflation", "Semiconductors")


def _article_url(story: _Story) -> str:
    return f"{BASE_URL}/{story.category}/{story.id}"


def _post_fields(story: _Story) -> dict[str, object]:
    return {
        "id": story.id,
        "category": story.category,
        "author": story.author,
        "published_at": story.published_at,
        "title": story.title,
        "description": story.description,
        "image_url": story.image_url,
        "is_premium": story.is_premium,
        "action": NavigateToArticleAction(article_id=story.id),
    }


def _post_large(story: _Story) -> PostLargeBlock:
    return PostLargeBlock(**_post_fields(story))


def _post_medium(story: _Story) -> PostMediumBlock:
    return PostMediumBlock(**_post_fields(story))


def _post_small(story: _Story) -> PostSmallBlock:
    return PostSmallBlock(**_post_fields(story))


def _grid_tile(story: _Story) -> PostGridTileBlock:
    return PostGridTileBlock(**_post_fields(story))


def _content(story: _Story) -> list[NewsBlock]:
    blocks: list[NewsBlock] = [
        ArticleIntroductionBlock(
            category=story.category,
            author=story.author,
            published_at=story.published_at,
            title=story.title,
            image_url=story.image_url,
            is_premium=story.is_premium,
        ),
        TextLeadParagraphBlock(text=story.description),
        TextHeadlineBlock(text=story.title),
    ]
    for n in range(1, story.paragraphs + 1):
        blocks.append(TextParagraphBlock(text=f"{story.title}: paragraph {n}."))
        if n == 2:
            blocks.append(ImageBlock(image_url=story.image_url))
            blocks.append(TextCaptionBlock(text=f"Photo: {story.author}", color="light"))
        if n == 4:
            blocks.append(BannerAdBlock(size="normal"))
    blocks.append(DividerHorizontalBlock())
    blocks.append(SpacerBlock(spacing="large"))
    blocks.append(NewsletterBlock())
    return blocks


def _slideshow(story: _Story) -> SlideshowBlock:
    return SlideshowBlock(
        title=f"In pictures: {story.title}",
        slides=[
            SlideBlock(
                caption=f"Slide {n}",
                description=story.description,
                photo_credit=story.author,
                image_url=story.image_url,
            )
            for n in range(1, 4)
        ],
    )


def build_news_items(stories: Iterable[_Story] = STORIES) -> list[NewsItem]:
    """Build one NewsItem per story, relating each to the other stories."""
    stories = list(stories)
    items: list[NewsItem] = []
    for story in stories:
        content = _content(story)
        related = [_post_small(other) for other in stories if other.id != story.id]
        items.append(
            NewsItem(
                content=content,
                content_preview=content[:PREVIEW_BLOCKS],
                post=_post_medium(story),
                url=_article_url(story),
                related_articles=related,
            )
        )
    return items


def build_feeds(stories: Iterable[_Story] = STORIES) -> dict[Category, list[NewsBlock]]:
    """Mixed "general" feed plus one feed per post category."""
    stories = list(stories)
    lead, *rest = stories

    general: list[NewsBlock] = [
        SectionHeaderBlock(title="Breaking news"),
        _post_large(lead),
        DividerHorizontalBlock(),
        SectionHeaderBlock(
            title="Technology",
            action=NavigateToFeedCategoryAction(category="technology"),
        ),
        *[_post_medium(story) for story in rest[:2]],
        SpacerBlock(spacing="medium"),
        BannerAdBlock(size="large"),
        PostGridGroupBlock(
            category=rest[2].category,
            tiles=[_grid_tile(story) for story in rest[2:]],
        ),
        SlideshowIntroductionBlock(
            title=f"In pictures: {lead.title}",
            cover_image_url=lead.image_url,
            action=NavigateToSlideshowAction(article_id=lead.id, slideshow=_slideshow(lead)),
        ),
        NewsletterBlock(),
        *[_post_small(story) for story in stories],
    ]

    feeds: dict[Category, list[NewsBlock]] = {"general": general}
    for story in stories:
        feed = feeds.setdefault(story.category, [])
        feed.append(_post_large(story) if not feed else _post_small(story))
    feeds.setdefault("technology", []).append(
        VideoIntroductionBlock(
            category="technology",
            title="Inside a chip fabrication plant",
            video_url=f"{BASE_URL}/videos/fab.mp4",
        )
    )
    return feeds


def build_popular_articles(stories: Iterable[_Story] = STORIES) -> list[NewsBlock]:
    stories = list(stories)
    trending: list[NewsBlock] = [TrendingStoryBlock(content=_post_small(stories[0]))]
    return trending + [_post_small(story) for story in stories[1:4]]


def build_seed_store(subscriptions: Iterable[Subscription] = ()) -> InMemoryNewsStore:
    """Build the store served at runtime from the static seed content."""
    return InMemoryNewsStore(
        news_items=build_news_items(),
        feeds=build_feeds(),
        subscriptions=subscriptions,
        popular_articles=build_popular_articles(),
        popular_topics=POPULAR_TOPICS,
        topics=TOPICS,
    )
