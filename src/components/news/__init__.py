"""
News component - articles, related articles, feeds, categories and search.
"""

from .component import (
    CATEGORIES,
    DEFAULT_CATEGORY,
    run,
    run_get_article,
    run_get_categories,
    run_get_feed,
    run_get_related,
    run_popular_search,
    run_relevant_search,
)
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

__all__ = [
    # Entry points
    "run",
    "run_get_article",
    "run_get_categories",
    "run_get_feed",
    "run_get_related",
    "run_popular_search",
    "run_relevant_search",
    "CATEGORIES",
    "DEFAULT_CATEGORY",
    # Input models
    "GetArticleInput",
    "GetCategoriesInput",
    "GetFeedInput",
    "GetRelatedInput",
    "PopularSearchInput",
    "RelevantSearchInput",
    # Output models
    "ArticleOutput",
    "CategoriesOutput",
    "FeedOutput",
    "RelatedArticlesOutput",
    "SearchOutput",
    # Ports
    "NewsDataSourcePort",
]
