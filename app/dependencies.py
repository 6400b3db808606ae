from fastapi import Depends

from app.repos.articles_repo import FilesystemArticlesRepo
from app.services.articles_service import ArticlesService
from app.services.author_service import AuthorService
from app.services.markdown_renderer import MarkdownRenderer
from app.settings import Settings, settings


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings


def get_articles_repo(current_settings: Settings = Depends(get_settings)):
    return FilesystemArticlesRepo(current_settings.articles_path)


def get_renderer(current_settings: Settings = Depends(get_settings)):
    return MarkdownRenderer(code_theme=current_settings.CODE_THEME)


def get_articles_service(
    repo=Depends(get_articles_repo),
    renderer=Depends(get_renderer),
):
    return ArticlesService(repo=repo, renderer=renderer)


def get_author_service(
    articles_service=Depends(get_articles_service),
    current_settings: Settings = Depends(get_settings),
):
    return AuthorService(articles_service, authors_dir=current_settings.authors_path)
