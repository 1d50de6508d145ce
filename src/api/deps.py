import os
from functools import lru_cache
from pathlib import Path
from typing import Annotated, NoReturn

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.adapters.memory.store import InMemoryNewsStore
from src.api.auth_utils import RequestUser, request_user_from_credentials
from src.domain.errors import NewsError
from src.rules.models import Rules

PROJECT_ROOT = Path(__file__).resolve().parents[2]


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = PROJECT_ROOT
        self.rules_path = Path(
            os.environ.get("NEWS_RULES_PATH", str(self.base_dir / "rules.yaml"))
        )
        self.log_level = os.environ.get("NEWS_LOG_LEVEL", "INFO").upper()


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- State built at startup (see src.api.main.lifespan) ---
def get_rules(request: Request) -> Rules:
    rules: Rules = request.app.state.rules
    return rules


def get_news_store(request: Request) -> InMemoryNewsStore:
    store: InMemoryNewsStore = request.app.state.news_store
    return store


# --- Auth ---
bearer_scheme = HTTPBearer(auto_error=False)


def get_request_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> RequestUser:
    """Resolve the caller from ``Authorization: Bearer <user id>`` (anonymous if absent)."""
    return request_user_from_credentials(credentials)


# --- Errors ---
_STATUS_BY_CODE = {
    "not_found": status.HTTP_404_NOT_FOUND,
    "bad_request": status.HTTP_400_BAD_REQUEST,
}


def raise_for_errors(errors: list[NewsError], default_detail: str = "Request failed") -> NoReturn:
    """Map the first component error to an HTTPException."""
    if not errors:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=default_detail)

    err = errors[0]
    raise HTTPException(
        status_code=_STATUS_BY_CODE.get(err.code, status.HTTP_400_BAD_REQUEST),
        detail=err.message,
    )
