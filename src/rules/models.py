from pydantic import BaseModel, Field, model_validator

from src.domain.blocks import Category
from src.domain.entities import Subscription


class ProjectRules(BaseModel):
    slug: str
    rules_version: str


class PaginationRules(BaseModel):
    default_limit: int = Field(default=20, ge=0)


class FeedRules(BaseModel):
    default_category: Category = "general"


class Rules(BaseModel):
    project: ProjectRules
    pagination: PaginationRules = Field(default_factory=PaginationRules)
    feed: FeedRules = Field(default_factory=FeedRules)
    subscriptions: list[Subscription]

    @model_validator(mode="after")
    def _unique_subscription_ids(self) -> "Rules":
        ids = [s.id for s in self.subscriptions]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise ValueError(f"Duplicate subscription ids: {', '.join(duplicates)}")
        return self
