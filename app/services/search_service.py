from typing import Iterable, List, Optional

from app.schemas.blog import ArticleSummary, FilterOptions

ALL_TAGS = "All Tags"
ALL_CATEGORIES = "All Categories"
ALL_SELECTORS = {"", "All", ALL_TAGS, ALL_CATEGORIES}


def is_all_selector(value: Optional[str]) -> bool:
    return value is None or value in ALL_SELECTORS


def matches_query(article: ArticleSummary, query: str) -> bool:
    if not query:
        return True
    needle = query.lower()
    return (
        needle in article.title.lower()
        or needle in article.description.lower()
        or any(needle in tag.lower() for tag in article.tags or [])
    )


def matches_tag(article: ArticleSummary, tag: Optional[str]) -> bool:
    return is_all_selector(tag) or tag in (article.tags or [])


def matches_category(article: ArticleSummary, category: Optional[str]) -> bool:
    return is_all_selector(category) or article.category == category


def filter_articles(
    articles: Iterable[ArticleSummary],
    query: str = "",
    tag: Optional[str] = None,
    category: Optional[str] = None,
) -> List[ArticleSummary]:
    """Case-insensitive substring search plus exact tag/category selectors."""
    query = query or ""
    return [
        a
        for a in articles
        if matches_query(a, query)
        and matches_tag(a, tag)
        and matches_category(a, category)
    ]


def collect_tags(articles: Iterable[ArticleSummary]) -> List[str]:
    tags = dict.fromkeys(tag for a in articles for tag in a.tags or [])
    return [ALL_TAGS, *tags]


def collect_categories(articles: Iterable[ArticleSummary]) -> List[str]:
    categories = dict.fromkeys(a.category for a in articles if a.category)
    return [ALL_CATEGORIES, *categories]


def filter_options(articles: List[ArticleSummary]) -> FilterOptions:
    return FilterOptions(
        tags=collect_tags(articles), categories=collect_categories(articles)
    )
