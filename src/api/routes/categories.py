from fastapi import APIRouter, Depends

from src.adapters.memory.store import InMemoryNewsStore
from src.api.deps import get_news_store
from src.api.schemas import CategoriesResponse
from src.components.news import GetCategoriesInput, run_get_categories

router = APIRouter()


@router.get("", response_model=CategoriesResponse)
def get_categories(store: InMemoryNewsStore = Depends(get_news_store)) -> CategoriesResponse:
    """List the categories that have a feed."""
    result = run_get_categories(GetCategoriesInput(), data_source=store)
    return CategoriesResponse(categories=result.categories)
