"""
Snippet predicates built from a FilterSpec.

Each filter kind is a small class with a ``matches(record)`` method. A FilterSpec
turns into an ordered list of filters (type, then language, then tag) that
is applied conjunctively.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from .types import FilterSpec, Snippet

ARTICLE_TYPE = "article"
SNIPPET_TYPE = "snippet"


class Matcher(Protocol):
    def matches(self, record: Snippet) -> bool: ...


@dataclass(frozen=True)
class TypeFilter:
    """Matches a content type. "article" matches everything but snippets."""

    type: str

    def matches(self, record: Snippet) -> bool:
        if self.type == ARTICLE_TYPE:
            return record.type != SNIPPET_TYPE
        return record.type == self.type


@dataclass(frozen=True)
class LanguageFilter:
    language: str

    def matches(self, record: Snippet) -> bool:
        return record.language is not None and record.language.id == self.language


@dataclass(frozen=True)
class TagFilter:
    """Matches the primary tag when ``primary`` is set, else any tag."""

    tag: str
    primary: bool = False

    def matches(self, record: Snippet) -> bool:
        if self.primary:
            return record.primary_tag == self.tag
        return self.tag in record.tags


def build_matchers(spec: FilterSpec) -> list[Matcher]:
    """Build the filters requested by ``spec``. Empty options add nothing."""
    matchers: list[Matcher] = []
    if spec.type:
        matchers.append(TypeFilter(spec.type))
    if spec.language:
        matchers.append(LanguageFilter(spec.language))
    if spec.tag:
        matchers.append(TagFilter(spec.tag, primary=spec.primary))
    return matchers


def matches_all(matchers: list[Matcher], record: Snippet) -> bool:
    return all(matcher.matches(record) for matcher in matchers)
