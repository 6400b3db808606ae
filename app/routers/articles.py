import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from app import dependencies as deps
from app.schemas.blog import (
    Article,
    ArticleMetadata,
    ArticleSummary,
    AuthorPage,
    FilterOptions,
)
from app.services.articles_service import ArticlesService
from app.services.author_service import AuthorService
from app.services.metadata_service import build_article_metadata
from app.services.search_service import filter_articles, filter_options
from app.services.sitemap_service import build_sitemap, render_sitemap_xml
from app.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/articles", response_model=List[ArticleSummary])
def list_articles(
    q: str = "",
    tag: Optional[str] = None,
    category: Optional[str] = None,
    service: ArticlesService = Depends(deps.get_articles_service),
):
    """List article summaries, newest first, optionally filtered."""
    try:
        return filter_articles(service.list_articles(), q, tag=tag, category=category)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing articles: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve articles")


@router.get("/articles/{slug}", response_model=Article)
def get_article(
    slug: str,
    service: ArticlesService = Depends(deps.get_articles_service),
):
    """Get a single rendered article by slug."""
    try:
        article = service.get_article(slug)
        if not article:
            raise HTTPException(status_code=404, detail="Article not found")
        return article
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving article {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve article")


@router.get("/articles/{slug}/metadata", response_model=ArticleMetadata)
def get_article_metadata(
    slug: str,
    service: ArticlesService = Depends(deps.get_articles_service),
    current_settings: Settings = Depends(deps.get_settings),
):
    try:
        return build_article_metadata(service.get_article(slug), current_settings)
    except Exception as e:
        logger.error(f"Unexpected error building metadata for {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to build metadata")


@router.get("/filters", response_model=FilterOptions)
def get_filters(service: ArticlesService = Depends(deps.get_articles_service)):
    """Tag and category choices for the search overlay."""
    try:
        return filter_options(service.list_articles())
    except Exception as e:
        logger.error(f"Unexpected error collecting filters: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve filters")


@router.get("/authors", response_model=List[str])
def list_authors(service: AuthorService = Depends(deps.get_author_service)):
    try:
        return service.list_author_slugs()
    except Exception as e:
        logger.error(f"Unexpected error listing authors: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve authors")


@router.get("/authors/{slug}", response_model=AuthorPage)
def get_author(slug: str, service: AuthorService = Depends(deps.get_author_service)):
    try:
        page = service.get_author_page(slug)
        if not page:
            raise HTTPException(status_code=404, detail="Author not found")
        return page
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving author {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve author")


@router.get("/sitemap.xml")
def get_sitemap(
    service: ArticlesService = Depends(deps.get_articles_service),
    current_settings: Settings = Depends(deps.get_settings),
):
    try:
        entries = build_sitemap(service.list_articles(), current_settings.base_url)
    except Exception as e:
        logger.error(f"Unexpected error building sitemap: {e}")
        raise HTTPException(status_code=500, detail="Failed to build sitemap")
    return Response(content=render_sitemap_xml(entries), media_type="application/xml")
