from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from src.domain.blocks import Category
from src.domain.entities import SubscriptionPlan

Block = dict[str, Any]  # Encoded NewsBlock (see src.domain.blocks.encode_block)


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- Articles ---
class ArticleResponse(_CamelModel):
    title: str
    content: list[Block]
    total_count: int
    url: str
    is_premium: bool
    is_preview: bool


class RelatedArticlesResponse(_CamelModel):
    related_articles: list[Block]
    total_count: int


# --- Feed ---
class FeedResponse(_CamelModel):
    feed: list[Block]
    total_count: int


class CategoriesResponse(_CamelModel):
    categories: list[Category]


# --- Search ---
class SearchResponse(_CamelModel):
    articles: list[Block]
    topics: list[str]


# --- Subscriptions & Users ---
class SubscriptionCostModel(_CamelModel):
    monthly: int
    annual: int


class SubscriptionModel(_CamelModel):
    id: str
    name: SubscriptionPlan
    cost: SubscriptionCostModel
    benefits: list[str] = []

    model_config = ConfigDict(from_attributes=True)


class SubscriptionsResponse(_CamelModel):
    subscriptions: list[SubscriptionModel]


class UserModel(_CamelModel):
    id: str
    subscription: SubscriptionPlan

    model_config = ConfigDict(from_attributes=True)


class CurrentUserResponse(_CamelModel):
    user: UserModel


# --- Newsletter ---
class NewsletterSubscriptionRequest(_CamelModel):
    email: str | None = None
