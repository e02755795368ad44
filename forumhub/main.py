from contextlib import asynccontextmanager
from datetime import datetime, timezone
import logging

from fastapi import FastAPI, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware

from forumhub.routers.topic_router import router as topic_router
from forumhub.domain.topic_store import TopicStore, TopicNotFoundError
from forumhub.config import settings, Settings

logger = logging.getLogger(__name__)
logging.basicConfig(level=settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.topic_store = TopicStore()
    logger.info("Application startup: topic store initialized.")
    try:
        yield
    finally:
        topic_count = app.state.topic_store.count()
        app.state.topic_store = None
        logger.info(f"Application shutdown: discarded {topic_count} in-memory topic(s).")


async def topic_not_found_handler(request: Request, exc: TopicNotFoundError):
    logger.warning(f"{request.method} {request.url.path}: topic {exc.topic_id} not found")
    return Response(status_code=status.HTTP_404_NOT_FOUND)


def create_app(app_settings: Settings = settings) -> FastAPI:
    app = FastAPI(
        title=app_settings.PROJECT_NAME,
        description=app_settings.PROJECT_DESCRIPTION,
        version=app_settings.API_VERSION,
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(TopicNotFoundError, topic_not_found_handler)

    @app.get("/version", tags=["Info"], summary="API version and environment")
    async def get_api_version_and_env():
        return {
            "project_version": app.version,
            "environment": app_settings.environment,
            "timestamp": datetime.now(timezone.utc).isoformat()
            }

    @app.get("/health", tags=["Info"], summary="Service health check")
    async def health_check(request: Request):
        return {
            "status": "healthy",
            "topics": request.app.state.topic_store.count(),
            "timestamp": datetime.now(timezone.utc).isoformat()
            }

    app.include_router(topic_router, prefix="/topico", tags=["Topic Management"])

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
