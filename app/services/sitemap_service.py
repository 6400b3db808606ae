import datetime
from typing import Iterable, List, Optional
from xml.etree import ElementTree as etree

from app.schemas.blog import ArticleSummary, SitemapEntry
from app.services.articles_service import parse_date
from app.services.author_service import author_slug

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"


def _to_iso(value: str) -> str:
    """Normalise a front matter date to a full UTC ISO-8601 timestamp."""
    parsed = parse_date(value)
    return parsed.isoformat() if parsed else value


def build_sitemap(
    articles: Iterable[ArticleSummary],
    base_url: str,
    now: Optional[datetime.datetime] = None,
) -> List[SitemapEntry]:
    base_url = base_url.rstrip("/")
    now = now or datetime.datetime.now(datetime.timezone.utc)
    articles = list(articles)

    entries = [
        SitemapEntry(
            url=base_url,
            lastModified=now.isoformat(),
            changeFrequency="daily",
            priority=1.0,
        )
    ]

    entries.extend(
        SitemapEntry(
            url=f"{base_url}/article/{a.slug}",
            lastModified=_to_iso(a.date),
            changeFrequency="monthly",
            priority=0.8,
        )
        for a in articles
    )

    authors = {}
    for a in articles:
        url = f"{base_url}/author/{author_slug(a.author)}"
        authors.setdefault(
            url,
            SitemapEntry(
                url=url,
                lastModified=_to_iso(a.date),
                changeFrequency="weekly",
                priority=0.6,
            ),
        )
    entries.extend(authors.values())
    return entries


def render_sitemap_xml(entries: Iterable[SitemapEntry]) -> str:
    urlset = etree.Element("urlset", {"xmlns": SITEMAP_NS})
    for entry in entries:
        url = etree.SubElement(urlset, "url")
        etree.SubElement(url, "loc").text = entry.url
        etree.SubElement(url, "lastmod").text = entry.lastModified
        etree.SubElement(url, "changefreq").text = entry.changeFrequency
        etree.SubElement(url, "priority").text = f"{entry.priority:.1f}"
    body = etree.tostring(urlset, encoding="unicode")
    return f'<?xml version="1.0" encoding="UTF-8"?>\n{body}'
