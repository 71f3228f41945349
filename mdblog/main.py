import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from mdblog.routers import posts
from mdblog.services.template_renderer import TemplateRenderer
from mdblog.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="mdblog", description="Markdown blog server")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Fails startup if either template is missing or broken
    app.state.template_renderer = TemplateRenderer.load(settings.templates_path)
    logger.info(f"Serving posts from {settings.content_path}")

    yield


app.router.lifespan_context = lifespan

app.include_router(posts.router)


def run():
    logger.info(f"Listening on {settings.HOST}:{settings.PORT}")
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
