"""Tests for snippet predicates built from filter options."""

from site_queries.matchers import (
    LanguageFilter,
    TagFilter,
    TypeFilter,
    build_matchers,
    matches_all,
)
from site_queries.types import FilterSpec, Language, Snippet


def _snippet(**kwargs) -> Snippet:
    kwargs.setdefault("slug", "/js/s/sample")
    kwargs.setdefault("type", "snippet")
    return Snippet(**kwargs)


def test_type_filter_article_matches_anything_but_snippets():
    article = TypeFilter("article")

    assert article.matches(_snippet(type="story"))
    assert article.matches(_snippet(type="cheatsheet"))
    assert not article.matches(_snippet(type="snippet"))


def test_type_filter_exact_type():
    story = TypeFilter("story")

    assert story.matches(_snippet(type="story"))
    assert not story.matches(_snippet(type="cheatsheet"))


def test_language_filter_requires_language():
    js = LanguageFilter("js")

    assert js.matches(_snippet(language=Language(id="js", name="JavaScript")))
    assert not js.matches(_snippet(language=Language(id="css")))
    assert not js.matches(_snippet(language=None))


def test_tag_filter_primary_and_any():
    record = _snippet(tags=["array", "function"])

    assert record.primary_tag == "array"
    assert TagFilter("function").matches(record)
    assert not TagFilter("function", primary=True).matches(record)
    assert TagFilter("array", primary=True).matches(record)


def test_build_matchers_order_and_skips_empty_options():
    spec = FilterSpec(language="js", tag="array", type="snippet", primary=True)

    assert build_matchers(spec) == [
        TypeFilter("snippet"),
        LanguageFilter("js"),
        TagFilter("array", primary=True),
    ]
    assert build_matchers(FilterSpec()) == []
    assert build_matchers(FilterSpec(tag="", language="")) == []


def test_matches_all_is_conjunction():
    record = _snippet(type="story", tags=["css"], language=Language(id="css"))

    assert matches_all([], record)
    assert matches_all([TypeFilter("article"), TagFilter("css")], record)
    assert not matches_all([TypeFilter("article"), TagFilter("html")], record)


def test_filter_spec_cache_key_keeps_primary_distinct():
    assert FilterSpec(tag="x", primary=True).cache_key() != FilterSpec(tag="x").cache_key()
    assert FilterSpec(tag="a-b").cache_key() != FilterSpec(language="a", tag="b").cache_key()
