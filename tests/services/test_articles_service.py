import pytest

from app.repos.articles_repo import FilesystemArticlesRepo
from app.schemas.blog import Article, ArticleSummary
from app.services.articles_service import (
    ArticlesService,
    _convert_date,
    _normalize_tags,
    date_sort_key,
    parse_article_data,
    parse_date,
)
from app.services.content_parser import ContentParser
from tests.conftest import FakeRenderer, FakeRepo, write_article


def make_service(articles_dir, renderer=None):
    return ArticlesService(
        repo=FilesystemArticlesRepo(articles_dir), renderer=renderer or FakeRenderer()
    )


def test_list_articles_sorts_by_date_desc(articles_dir, make_article):
    make_article("january", title="January", date="2025-01-01")
    make_article("june", title="June", date="2025-06-01")

    result = make_service(articles_dir).list_articles()

    assert [a.slug for a in result] == ["june", "january"]
    assert all(isinstance(a, ArticleSummary) for a in result)


def test_list_articles_keeps_directory_order_for_equal_dates(articles_dir, make_article):
    make_article("b-post", date="2025-03-01")
    make_article("a-post", date="2025-03-01")
    make_article("c-post", date="2025-04-01")

    result = make_service(articles_dir).list_articles()

    assert [a.slug for a in result] == ["c-post", "a-post", "b-post"]


def test_list_articles_yields_one_summary_per_markdown_file(articles_dir, make_article):
    make_article("first")
    make_article("second")
    write_article(articles_dir, "notes.txt", "not an article")

    result = make_service(articles_dir).list_articles()

    assert sorted(a.slug for a in result) == ["first", "second"]


def test_list_articles_returns_empty_when_directory_missing(tmp_path):
    service = make_service(tmp_path / "does-not-exist")

    assert service.list_articles() == []


def test_list_articles_skips_unparseable_files(articles_dir, make_article):
    make_article("good")
    write_article(articles_dir, "broken.md", "---\ntitle: [unclosed\n---\nbody\n")
    write_article(articles_dir, "no-title.md", "---\nauthor: X\ndate: 2025-01-01\n---\nbody\n")

    result = make_service(articles_dir).list_articles()

    assert [a.slug for a in result] == ["good"]


def test_list_articles_defaults_optional_fields(articles_dir, make_article):
    make_article("plain")

    article = make_service(articles_dir).list_articles()[0]

    assert article.tags is None
    assert article.category is None
    assert article.image is None


def test_list_articles_reads_optional_fields(articles_dir, make_article):
    make_article(
        "full",
        tags='["DeFi", "Solana"]',
        category="Research",
        image="/images/cover.png",
    )

    article = make_service(articles_dir).list_articles()[0]

    assert article.tags == ["DeFi", "Solana"]
    assert article.category == "Research"
    assert article.image == "/images/cover.png"
    assert article.date == "2025-01-01"


def test_get_article_renders_content(articles_dir, make_article):
    make_article("hello", title="Hello", body="Some *markdown*.")
    renderer = FakeRenderer()

    result = make_service(articles_dir, renderer).get_article("hello")

    assert isinstance(result, Article)
    assert result.title == "Hello"
    assert result.content == "<p>Some *markdown*.</p>"
    assert [c.strip() for c in renderer.calls] == ["Some *markdown*."]


def test_get_article_returns_none_when_not_found(articles_dir, make_article):
    make_article("exists")

    assert make_service(articles_dir).get_article("missing") is None


def test_get_article_returns_none_when_render_fails(articles_dir, make_article):
    make_article("boom")

    class BoomRenderer:
        def render(self, content):
            raise RuntimeError("boom")

    assert make_service(articles_dir, BoomRenderer()).get_article("boom") is None


def test_get_article_returns_none_when_front_matter_invalid(articles_dir):
    write_article(articles_dir, "bad.md", "---\ntitle: [unclosed\n---\nbody\n")

    assert make_service(articles_dir).get_article("bad") is None


def test_get_article_is_idempotent_with_real_renderer(articles_dir, make_article):
    make_article("stable", body="# Heading\n\n```python\nprint('hi')\n```\n\n$x^2$")
    service = ArticlesService(repo=FilesystemArticlesRepo(articles_dir))

    first = service.get_article("stable")
    second = service.get_article("stable")

    assert first.content == second.content


def test_service_works_with_any_repo(tmp_path):
    path = write_article(
        tmp_path,
        "from-fake.md",
        """
        ---
        title: From Fake
        author: Ada
        date: 2024-02-02
        description: d
        ---
        body
        """,
    )
    service = ArticlesService(repo=FakeRepo({"from-fake": path}), renderer=FakeRenderer())

    assert [a.slug for a in service.list_articles()] == ["from-fake"]
    assert service.get_article("from-fake").author == "Ada"


def test_parse_article_data_requires_core_fields(tmp_path):
    path = write_article(tmp_path, "x.md", "---\ntitle: X\n---\nbody\n")

    with pytest.raises(ValueError):
        parse_article_data(path, "x", parser=ContentParser())


def test_convert_date_handles_dates_and_strings():
    import datetime

    assert _convert_date(datetime.date(2025, 6, 1)) == "2025-06-01"
    assert _convert_date(datetime.datetime(2025, 6, 1, 8, 30)) == "2025-06-01T08:30:00"
    assert _convert_date("2025-06-01") == "2025-06-01"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, None),
        ("solo", ["solo"]),
        (["a", None, "b"], ["a", "b"]),
        ([1, 2], ["1", "2"]),
    ],
)
def test_normalize_tags(value, expected):
    assert _normalize_tags(value) == expected


def test_list_articles_skips_non_string_front_matter(articles_dir, make_article):
    make_article("good")
    make_article("numeric", title="2024")
    make_article("listy", author="[a, b]")

    result = make_service(articles_dir).list_articles()

    assert [a.slug for a in result] == ["good"]


def test_list_articles_orders_mixed_offsets_by_instant(articles_dir, make_article):
    # a is 04:00Z on Jan 2, b is 16:00Z on Jan 1
    make_article("a", date="2025-01-01 23:00:00-05:00")
    make_article("b", date="2025-01-02T01:00:00+09:00")
    make_article("c", date="2024-12-31")

    result = make_service(articles_dir).list_articles()

    assert [a.slug for a in result] == ["a", "b", "c"]


def test_date_sort_key_puts_unparseable_dates_last():
    keys = sorted(
        ["2025-01-01", "someday", "2025-01-01T12:00:00+00:00"],
        key=date_sort_key,
        reverse=True,
    )

    assert keys == ["2025-01-01T12:00:00+00:00", "2025-01-01", "someday"]


def test_parse_date_normalises_to_utc():
    parsed = parse_date("2025-01-02T01:00:00+09:00")

    assert parsed.isoformat() == "2025-01-01T16:00:00+00:00"
    assert parse_date("2025-06-01").tzinfo is not None
    assert parse_date("not a date") is None
