"""
FastAPI application for the StoryQuest API.
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from storyquest.config import APP_ENV, CORS_ORIGINS
from storyquest.shared.services.orm_service import init_db
from storyquest.shared.services.feature_flags_service import FeatureFlagService, feature_flags as default_flags

# Import routers
from storyquest.api.routers import (
    auth_router,
    campaigns_router,
    characters_router,
    story_posts_router,
    dm_responses_router,
    items_router
)

logger = logging.getLogger(__name__)

API_PREFIX = "/api"

# Flag name -> router registered when the flag is on
OPTIONAL_ROUTERS = [
    ("campaigns", campaigns_router.router),
    ("characters", characters_router.router),
    ("story_posts", story_posts_router.router),
    ("dm_responses", dm_responses_router.router),
    ("items", items_router.router),
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Check the database and create tables on startup."""
    init_db()
    yield
    logger.info("[lifespan] Shutting down...")


def create_app(feature_flags: FeatureFlagService = None) -> FastAPI:
    flags = feature_flags or default_flags

    app = FastAPI(title="StoryQuest API", lifespan=lifespan)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(f"[unhandled_exception_handler] {request.method} {request.url.path} failed")
        body = {"detail": "Internal Server Error"}
        if APP_ENV == "development":
            body["message"] = str(exc)
        return JSONResponse(status_code=500, content=body)

    # Register routers
    app.include_router(auth_router.router, prefix=API_PREFIX)
    for flag, router in OPTIONAL_ROUTERS:
        if flags.is_enabled(flag):
            app.include_router(router, prefix=API_PREFIX)
        else:
            logger.info(f"[create_app] Feature '{flag}' is disabled; routes not registered")

    @app.get(f"{API_PREFIX}/features")
    async def get_features():
        return flags.get_all_flags()

    @app.get("/health")
    async def health():
        return {"status": "OK", "message": "Server is running"}

    return app


app = create_app()
