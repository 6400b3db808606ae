import logging
import re
from pathlib import Path
from typing import List, Optional

import frontmatter
import yaml

from app.schemas.blog import AuthorPage, AuthorProfile
from app.settings import settings

logger = logging.getLogger(__name__)


def author_slug(name: str) -> str:
    """Route form of an author name: lowercase, whitespace runs to dashes."""
    return re.sub(r"\s+", "-", name.lower())


def slugify(name: str) -> str:
    """Matching form: every non-alphanumeric to a dash, collapsed and trimmed."""
    slug = re.sub(r"[^a-z0-9]", "-", name.lower())
    slug = re.sub(r"-+", "-", slug)
    return slug.strip("-")


def display_name_from_slug(slug: str) -> str:
    return " ".join(word.capitalize() for word in slug.split("-") if word)


def _optional_str(value) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)


class AuthorService:
    def __init__(self, articles_service, authors_dir: Path | str | None = None):
        self.articles_service = articles_service
        self.authors_dir = Path(authors_dir) if authors_dir else settings.authors_path

    def list_author_slugs(self) -> List[str]:
        articles = self.articles_service.list_articles()
        return list(dict.fromkeys(author_slug(a.author) for a in articles))

    def get_profile(self, slug: str) -> AuthorProfile:
        slug = slug.lower()
        path = self.authors_dir / f"{slug}.md"
        try:
            metadata = frontmatter.load(str(path)).metadata or {}
        except (OSError, yaml.YAMLError) as e:
            logger.info(f"No author profile for {slug}: {e}")
            # without a profile file the slug itself is shown, dashes as spaces
            metadata = {"name": slug.replace("-", " ")}

        name = _optional_str(metadata.get("name")) or display_name_from_slug(slug)
        return AuthorProfile(
            name=name,
            bio=_optional_str(metadata.get("bio")),
            whoami=_optional_str(metadata.get("whoami")),
            avatar=_optional_str(metadata.get("avatar")),
            twitter=_optional_str(metadata.get("twitter")),
        )

    def get_author_page(self, slug: str) -> Optional[AuthorPage]:
        slug = slug.lower()
        articles = [
            a for a in self.articles_service.list_articles() if slugify(a.author) == slug
        ]
        if not articles:
            return None
        return AuthorPage(slug=slug, profile=self.get_profile(slug), articles=articles)
