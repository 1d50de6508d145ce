import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.adapters.memory.seed import build_seed_store
from src.api.deps import get_settings
from src.rules.loader import load_rules

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler: load rules and build the news store once."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Fail fast on a missing or invalid rules file
    try:
        rules = load_rules(settings.rules_path)
    except (FileNotFoundError, ValueError) as e:
        logger.critical(f"Rules load failed: {e}")
        raise

    app.state.rules = rules
    app.state.news_store = build_seed_store(rules.subscriptions)
    logger.info(
        f"Rules loaded from {settings.rules_path}; "
        f"{len(app.state.news_store.get_categories())} feeds, "
        f"{len(rules.subscriptions)} subscriptions"
    )

    yield


app = FastAPI(
    title="News Content API",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# --- Routers ---
from src.api.routes import (  # noqa: E402
    articles,
    categories,
    feed,
    newsletter,
    search,
    subscriptions,
    users,
)

API_PREFIX = "/api/v1"

app.include_router(articles.router, prefix=f"{API_PREFIX}/articles", tags=["Articles"])
app.include_router(feed.router, prefix=f"{API_PREFIX}/feed", tags=["Feed"])
app.include_router(categories.router, prefix=f"{API_PREFIX}/categories", tags=["Categories"])
app.include_router(search.router, prefix=f"{API_PREFIX}/search", tags=["Search"])
app.include_router(
    subscriptions.router, prefix=f"{API_PREFIX}/subscriptions", tags=["Subscriptions"]
)
app.include_router(users.router, prefix=f"{API_PREFIX}/users", tags=["Users"])
app.include_router(newsletter.router, prefix=f"{API_PREFIX}/newsletter", tags=["Newsletter"])


# CORS (Allow mobile/web clients in development)
origins = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health_check() -> dict[str, Any]:
    """Health check endpoint."""
    return {"status": "ok", "service": "news-api"}
