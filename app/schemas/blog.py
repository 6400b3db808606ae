from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ArticleSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    slug: str
    title: str
    author: str
    date: str
    description: str
    tags: Optional[List[str]] = None
    category: Optional[str] = None
    image: Optional[str] = None


class Article(ArticleSummary):
    content: str


class FilterOptions(BaseModel):
    tags: List[str] = Field(default_factory=list)
    categories: List[str] = Field(default_factory=list)


class AuthorProfile(BaseModel):
    name: str
    bio: Optional[str] = None
    whoami: Optional[str] = None
    avatar: Optional[str] = None
    twitter: Optional[str] = None


class AuthorPage(BaseModel):
    slug: str
    profile: AuthorProfile
    articles: List[ArticleSummary] = Field(default_factory=list)


class SitemapEntry(BaseModel):
    url: str
    lastModified: str
    changeFrequency: str
    priority: float


class OpenGraph(BaseModel):
    title: str
    description: str
    type: str = "article"
    publishedTime: Optional[str] = None
    images: List[str] = Field(default_factory=list)


class TwitterCard(BaseModel):
    card: str = "summary_large_image"
    title: str
    description: str
    images: List[str] = Field(default_factory=list)


class ArticleMetadata(BaseModel):
    title: str
    description: str
    canonical: Optional[str] = None
    openGraph: Optional[OpenGraph] = None
    twitter: Optional[TwitterCard] = None
    jsonLd: Optional[Dict[str, Any]] = None
