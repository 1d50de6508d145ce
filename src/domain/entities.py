from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from src.domain.blocks import NewsBlock, PostBlock

# --- Enums / Literals ---
SubscriptionPlan = Literal["none", "basic", "plus", "premium"]

# --- Content ---


@dataclass(frozen=True)
class NewsItem:
    """Full and preview content of one article plus its feed preview."""

    content: list[NewsBlock]
    content_preview: list[NewsBlock]
    post: PostBlock
    url: str
    related_articles: list[NewsBlock] = field(default_factory=list)

    @property
    def id(self) -> str:
        return self.post.id

    @property
    def title(self) -> str:
        return self.post.title


@dataclass(frozen=True)
class Article:
    title: str
    blocks: list[NewsBlock]
    total_blocks: int
    url: str


@dataclass(frozen=True)
class Feed:
    blocks: list[NewsBlock]
    total_blocks: int


@dataclass(frozen=True)
class RelatedArticles:
    blocks: list[NewsBlock]
    total_blocks: int

    @classmethod
    def empty(cls) -> RelatedArticles:
        return cls(blocks=[], total_blocks=0)


@dataclass(frozen=True)
class SearchResult:
    articles: list[NewsBlock]
    topics: list[str]


# --- Users & Subscriptions ---


class User(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    subscription: SubscriptionPlan = "none"


class SubscriptionCost(BaseModel):
    monthly: int = Field(ge=0)
    annual: int = Field(ge=0)


class Subscription(BaseModel):
    id: str
    name: SubscriptionPlan
    cost: SubscriptionCost
    benefits: list[str] = Field(default_factory=list)
