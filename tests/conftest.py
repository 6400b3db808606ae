import textwrap
from pathlib import Path

import pytest

from app.schemas.blog import ArticleSummary


def write_article(directory: Path, name: str, raw: str) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_text(textwrap.dedent(raw).lstrip(), encoding="utf-8")
    return path


@pytest.fixture
def articles_dir(tmp_path):
    return tmp_path / "articles"


@pytest.fixture
def make_article(articles_dir):
    def _make(slug: str, title: str = "Title", date: str = "2025-01-01", **extra):
        lines = [
            "---",
            f"title: {title}",
            f"author: {extra.pop('author', 'Jane Doe')}",
            f"date: {date}",
            f"description: {extra.pop('description', 'A description')}",
        ]
        for key, value in extra.items():
            if key != "body":
                lines.append(f"{key}: {value}")
        lines.append("---")
        lines.append(extra.get("body", "Body text."))
        return write_article(articles_dir, f"{slug}.md", "\n".join(lines) + "\n")

    return _make


def summary(slug: str, **fields) -> ArticleSummary:
    data = {
        "slug": slug,
        "title": slug.replace("-", " ").title(),
        "author": "Jane Doe",
        "date": "2025-01-01",
        "description": "",
    }
    data.update(fields)
    return ArticleSummary(**data)


class FakeRepo:
    """
    Minimal repo stand-in used in service tests.
    """

    def __init__(self, files: dict[str, Path]):
        self.files = files

    def list_article_files(self):
        return list(self.files.values())

    def get_article_file(self, slug):
        return self.files.get(slug)

    @staticmethod
    def slug_for(path: Path) -> str:
        return path.stem


class FakeArticlesService:
    """
    Minimal articles service stand-in for router and author tests.
    """

    def __init__(self, list_articles_return=None, get_article_return=None):
        self._list_articles_return = list_articles_return or []
        self._get_article_return = get_article_return
        self.requested = []

    def list_articles(self):
        return self._list_articles_return

    def get_article(self, slug: str):
        self.requested.append(slug)
        return self._get_article_return


class FakeRenderer:
    def __init__(self):
        self.calls = []

    def render(self, content: str) -> str:
        self.calls.append(content)
        return f"<p>{content.strip()}</p>"
