import logging
from pathlib import Path
from typing import List, Optional

from app.settings import settings

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIX = ".md"


class FilesystemArticlesRepo:
    def __init__(self, articles_dir: Path | str | None = None):
        self.root = Path(articles_dir) if articles_dir else settings.articles_path

    def list_article_files(self) -> List[Path]:
        if not self.root.is_dir():
            logger.info(f"Articles directory {self.root} does not exist")
            return []
        return sorted(
            path
            for path in self.root.iterdir()
            if path.is_file() and path.name.endswith(MARKDOWN_SUFFIX)
        )

    def get_article_file(self, slug: str) -> Optional[Path]:
        if not self._is_valid_slug(slug):
            return None
        path = self.root / f"{slug}{MARKDOWN_SUFFIX}"
        if not path.is_file():
            return None
        return path

    @staticmethod
    def slug_for(path: Path) -> str:
        return path.name.removesuffix(MARKDOWN_SUFFIX)

    @staticmethod
    def _is_valid_slug(slug: str | None) -> bool:
        if not slug:
            return False
        return "/" not in slug and "\\" not in slug and not slug.startswith(".")
