import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.routers import articles, images
from app.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if not settings.articles_path.is_dir():
        logger.warning(
            f"Articles directory {settings.articles_path} not found, serving an empty blog"
        )
    else:
        logger.info(f"Serving articles from {settings.articles_path}")
    yield


app = FastAPI(
    title="Zendfi Blog API",
    description="Markdown articles, search and sitemap for the Zendfi blog",
    lifespan=lifespan,
)

app.include_router(images.router)
app.include_router(articles.router)


@app.get("/")
async def root():
    return {"message": "Zendfi Blog API is running"}
