import logging
from pathlib import Path

import frontmatter

logger = logging.getLogger(__name__)


class ContentParser:
    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def get_markdown_content(self, path: Path) -> str:
        """Read the full markdown source of an article file."""
        return Path(path).read_text(encoding=self.encoding)

    def parse(self, path: Path) -> frontmatter.Post:
        """Split an article file into front matter metadata and markdown body."""
        return frontmatter.loads(self.get_markdown_content(path))
