from fastapi import APIRouter, Depends

from src.adapters.memory.store import InMemoryNewsStore
from src.api.auth_utils import RequestUser
from src.api.deps import get_news_store, get_request_user, raise_for_errors
from src.api.schemas import CurrentUserResponse, UserModel
from src.components.subscriptions import GetUserInput, run_get_user

router = APIRouter()


@router.get("/me", response_model=CurrentUserResponse)
def get_current_user(
    user: RequestUser = Depends(get_request_user),
    store: InMemoryNewsStore = Depends(get_news_store),
) -> CurrentUserResponse:
    """The caller and its subscription tier."""
    result = run_get_user(GetUserInput(user_id=user.id), store=store)
    if not result.success or result.user is None:
        raise_for_errors(result.errors)

    return CurrentUserResponse(user=UserModel.model_validate(result.user))
