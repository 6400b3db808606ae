import datetime
import logging
from pathlib import Path
from typing import List, Optional

from app.schemas.blog import Article, ArticleSummary
from app.services.content_parser import ContentParser
from app.services.markdown_renderer import MarkdownRenderer

logger = logging.getLogger(__name__)


class ArticlesService:
    def __init__(self, repo, parser=None, renderer=None):
        self.repo = repo
        self.parser = parser or ContentParser()
        self.renderer = renderer or MarkdownRenderer()

    def list_articles(self) -> List[ArticleSummary]:
        articles = []
        for path in self.repo.list_article_files():
            slug = self.repo.slug_for(path)
            try:
                article_data = parse_article_data(path, slug, parser=self.parser)
                articles.append(ArticleSummary(**article_data))
            except Exception as e:
                logger.warning(f"Skipping article {slug}: {e}")
                continue

        # sort is stable, so equal dates keep directory order
        articles.sort(key=lambda a: date_sort_key(a.date), reverse=True)
        return articles

    def get_article(self, slug: str) -> Optional[Article]:
        path = self.repo.get_article_file(slug)
        if not path:
            return None
        try:
            article_data = parse_article_data(
                path, slug, include_content=True, parser=self.parser, renderer=self.renderer
            )
            return Article(**article_data)
        except Exception as e:
            logger.error(f"Error loading article {slug}: {e}")
            return None


def parse_article_data(
    path: Path, slug: str, include_content: bool = False, *, parser, renderer=None
) -> dict:
    """Parse front matter (and optionally render the body) into article fields"""
    parsed = parser.parse(path)
    metadata = parsed.metadata or {}

    article_data = {
        "slug": slug,
        "title": _require(metadata, "title"),
        "author": _require(metadata, "author"),
        "date": _convert_date(_require(metadata, "date")),
        "description": _require(metadata, "description"),
        "tags": _normalize_tags(metadata.get("tags")),
        "category": _optional_str(metadata.get("category")),
        "image": metadata.get("image") or None,
    }

    if include_content:
        article_data["content"] = renderer.render(parsed.content)

    return article_data


def _require(metadata: dict, key: str):
    value = metadata.get(key)
    if value is None or value == "":
        raise ValueError(f"missing front matter field '{key}'")
    return value


def _normalize_tags(value) -> Optional[List[str]]:
    if value is None:
        return None
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value if item is not None]
    return [str(value)]


def _optional_str(value) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)


def _convert_date(value) -> str:
    # YAML turns bare dates into date/datetime objects
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    return str(value)


def parse_date(value: str) -> Optional[datetime.datetime]:
    """ISO-8601 string to an aware UTC datetime; naive values are taken as UTC."""
    try:
        parsed = datetime.datetime.fromisoformat(value)
    except (TypeError, ValueError):
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=datetime.timezone.utc)
    return parsed.astimezone(datetime.timezone.utc)


def date_sort_key(value: str) -> tuple:
    # unparseable dates sort below every real date, among themselves by raw text
    parsed = parse_date(value)
    if parsed is None:
        return (0, 0.0, value)
    return (1, parsed.timestamp(), "")
