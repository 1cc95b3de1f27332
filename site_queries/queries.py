"""
Prepared, memoized queries over the site content.

All queries are pure functions of the dataset, the redirect table and the
cover asset listing as they are at first call. Results are stored in a
QueryCache owned by the PreparedQueries instance, so repeated calls during
a build return the stored value without recomputing it.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import partial
import logging
from pathlib import Path

from .assets import list_cover_assets
from .cache import QueryCache
from .config import AppConfig
from .dataset import Dataset, Model, RecordSet, load_snippets
from .logging_utils import log_event
from .matchers import build_matchers, matches_all
from .redirects import RedirectTable, load_redirects
from .types import FilterSpec, Snippet

logger = logging.getLogger(__name__)


class PreparedQueries:
    """Entry point for the aggregate, filter and redirect queries of one build.

    The redirect table and the cover listing are supplied as loaders and
    read on first use only.

    Args:
        dataset: Dataset holding the content model
        redirects: Zero-argument callable returning the RedirectTable
        cover_assets: Zero-argument callable returning cover basenames
        cache: Cache to store results in (a new one when omitted)
        model_name: Name of the model queried in ``dataset``
    """

    def __init__(
        self,
        dataset: Dataset,
        redirects: Callable[[], RedirectTable],
        cover_assets: Callable[[], list[str]],
        cache: QueryCache | None = None,
        model_name: str = "Snippet",
    ):
        self.dataset = dataset
        self.cache = cache if cache is not None else QueryCache()
        self.model_name = model_name
        self._load_redirects = redirects
        self._list_covers = cover_assets

    def _records(self) -> RecordSet:
        return self.dataset.get_model(self.model_name).records

    def _redirect_table(self) -> RedirectTable:
        return self.cache.get_or_compute(("redirect_table",), self._load_redirects)

    def cover_image_usage(self) -> dict[str, int]:
        """Return cover name to usage count, most used first.

        Every listed asset appears, unused ones with a count of 0. Ties keep
        the listing order. Records pointing at unlisted covers are ignored.
        """
        return self.cache.get_or_compute(("cover_image_usage",), self._compute_cover_usage)

    def _compute_cover_usage(self) -> dict[str, int]:
        grouped = self._records().group_by("cover")
        counts = [(cover, len(grouped.get(cover, ()))) for cover in self._list_covers()]
        counts.sort(key=lambda item: item[1], reverse=True)
        return dict(counts)

    def snippet_count_by_type(self) -> dict[str, int]:
        """Return the number of records per observed type."""
        return self.cache.get_or_compute(("snippet_count_by_type",), self._compute_type_counts)

    def _compute_type_counts(self) -> dict[str, int]:
        grouped = self._records().group_by("type")
        return {record_type: len(records) for record_type, records in grouped.items()}

    def match_snippets(
        self,
        language: str | None = None,
        tag: str | None = None,
        type: str | None = None,
        primary: bool = False,
    ) -> tuple[Snippet, ...]:
        """Return records matching every given option, in store order.

        Args:
            language: Language id (e.g., "js")
            tag: Tag to look for
            type: Content type; "article" matches anything but snippets
            primary: Match ``tag`` against the primary tag only
        """
        spec = FilterSpec(language=language, tag=tag, type=type, primary=primary)
        return self.cache.get_or_compute(spec.cache_key(), partial(self._compute_matches, spec))

    def _compute_matches(self, spec: FilterSpec) -> tuple[Snippet, ...]:
        matchers = build_matchers(spec)
        return tuple(self._records().where(lambda record: matches_all(matchers, record)))

    def page_alternative_urls(self, slug: str) -> tuple[str, ...]:
        """Return ``slug`` and every slug that redirects to it, directly or not.

        Args:
            slug: Canonical slug (e.g., "/js/s/bifurcate-by")
        """
        return self.cache.get_or_compute(
            ("page_alternative_urls", slug),
            lambda: tuple(self._redirect_table().alternatives(slug)),
        )


def build_queries(cfg: AppConfig, root: Path = Path(".")) -> PreparedQueries:
    """Wire PreparedQueries from configuration.

    Snippets are loaded immediately; redirects and cover assets on first use.

    Args:
        cfg: Application configuration
        root: Directory that relative content paths are resolved against
    """
    content = cfg.content
    snippets = load_snippets(root / content.snippets_path)
    dataset = Dataset([Model(content.model_name, snippets)])
    log_event(
        logger,
        "Query layer ready",
        records=len(snippets),
        model=content.model_name,
        root=str(root),
    )
    return PreparedQueries(
        dataset,
        redirects=partial(load_redirects, root / content.redirects_path),
        cover_assets=partial(
            list_cover_assets, root / content.cover_asset_path, content.supported_extensions
        ),
        model_name=content.model_name,
    )
