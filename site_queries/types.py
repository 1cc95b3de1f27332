"""
Core data types for the site query layer.

This module defines the structures the query builders read:
- Language: Language metadata attached to a snippet
- Snippet: One content record of the site corpus
- RedirectEdge: A legacy slug served as a canonical slug
- FilterSpec: Options accepted by the snippet matcher
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Language:
    """Language a snippet is written in.

    Attributes:
        id: Short language identifier (e.g., "js", "css", "python")
        name: Optional display name (e.g., "JavaScript")
    """
    id: str
    name: str | None = None


@dataclass
class Snippet:
    """Represents one content record of the site corpus.

    Records are only ever read by the query layer, never mutated.

    Attributes:
        slug: URL path identifying the page (e.g., "/js/s/bifurcate-by")
        type: Content type tag ("snippet", "story", "cheatsheet", ...)
        title: Optional display title
        language: Optional language metadata
        tags: Ordered list of tags
        primary_tag: The main tag of the record, first tag when not given
        cover: Optional cover asset basename (no directory, no extension)
    """
    slug: str
    type: str
    title: str | None = None
    language: Language | None = None
    tags: list[str] = field(default_factory=list)
    primary_tag: str | None = None
    cover: str | None = None

    def __post_init__(self) -> None:
        if self.primary_tag is None and self.tags:
            self.primary_tag = self.tags[0]

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Snippet:
        """Build a snippet from a loosely shaped mapping (YAML/JSON input).

        Accepts both ``primaryTag`` and ``primary_tag``. ``language`` may be
        a mapping with an ``id`` or a bare language id string.
        """
        language = raw.get("language")
        if isinstance(language, dict):
            language = Language(id=language["id"], name=language.get("name"))
        elif isinstance(language, str):
            language = Language(id=language)
        return cls(
            slug=raw["slug"],
            type=raw["type"],
            title=raw.get("title"),
            language=language,
            tags=_as_tag_list(raw.get("tags")),
            primary_tag=raw.get("primaryTag", raw.get("primary_tag")),
            cover=raw.get("cover"),
        )


@dataclass(frozen=True)
class RedirectEdge:
    """A redirect stating that ``source`` should be served as ``target``.

    Attributes:
        source: The legacy slug (``from`` in the redirects file)
        target: The canonical slug (``to`` in the redirects file)
    """
    source: str
    target: str


@dataclass(frozen=True)
class FilterSpec:
    """Options for matching snippets. Every option is optional.

    Attributes:
        language: Language id the snippet must be written in
        tag: Tag the snippet must carry
        type: Content type; "article" means anything but "snippet"
        primary: If True, ``tag`` must be the primary tag rather than any tag
    """
    language: str | None = None
    tag: str | None = None
    type: str | None = None
    primary: bool = False

    def cache_key(self) -> tuple[str, str | None, str | None, str | None, bool]:
        """Return a structured key that keeps every option distinct."""
        return ("match_snippets", self.language, self.tag, self.type, self.primary)


def _as_tag_list(value: Any) -> list[str]:
    """Normalize a ``tags`` value: missing is empty, a lone string is one tag."""
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list):
        raise ValueError(f"tags must be a list of strings, got {type(value).__name__}")
    return [str(tag) for tag in value]
