from typing import Optional

from app.schemas.blog import Article, ArticleMetadata, OpenGraph, TwitterCard
from app.settings import Settings, settings as default_settings

NOT_FOUND_METADATA = ArticleMetadata(
    title="Article Not Found",
    description="The requested article could not be found.",
)


def build_article_metadata(
    article: Optional[Article], site: Optional[Settings] = None
) -> ArticleMetadata:
    """Link-preview tags for an article page."""
    if article is None:
        return NOT_FOUND_METADATA

    site = site or default_settings
    canonical = f"/article/{article.slug}"
    images = [site.DEFAULT_OG_IMAGE]

    return ArticleMetadata(
        title=article.title,
        description=article.description,
        canonical=canonical,
        openGraph=OpenGraph(
            title=article.title,
            description=article.description,
            publishedTime=article.date,
            images=images,
        ),
        twitter=TwitterCard(
            title=article.title,
            description=article.description,
            images=images,
        ),
        jsonLd={
            "@context": "https://schema.org",
            "@type": "BlogPosting",
            "headline": article.title,
            "description": article.description,
            "datePublished": article.date,
            "url": f"{site.base_url}{canonical}",
            "publisher": {"@type": "Organization", "name": site.SITE_NAME},
        },
    )
