"""
Redirect table loading and redirect closure resolution.

The redirects file is a YAML list of ``{from, to}`` pairs where ``from`` is
a legacy slug and ``to`` the slug it should be served as. Chains and cycles
are both allowed in the file.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
import logging
from pathlib import Path

import yaml

from .types import RedirectEdge

logger = logging.getLogger(__name__)


class RedirectFileError(ValueError):
    """Raised when the redirects file does not hold a list of {from, to} pairs."""


class RedirectTable:
    """Ordered redirect edges with a reverse index from target to sources."""

    def __init__(self, edges: Iterable[RedirectEdge]):
        self.edges = list(edges)
        self._sources_by_target: dict[str, list[str]] = {}
        for edge in self.edges:
            self._sources_by_target.setdefault(edge.target, []).append(edge.source)

    def __len__(self) -> int:
        return len(self.edges)

    def sources_of(self, slug: str) -> list[str]:
        """Return slugs with a direct redirect to ``slug``, in file order."""
        return self._sources_by_target.get(slug, [])

    def alternatives(self, slug: str) -> list[str]:
        """Return every slug whose redirect chain ends at ``slug``.

        Breadth-first search over the reverse edges. A slug is marked as
        visited before it is queued, so each slug is queued at most once
        and cycles terminate.

        Args:
            slug: The canonical slug (e.g., "/js/s/bifurcate-by")

        Returns:
            ``slug`` first, then its predecessors in discovery order
        """
        visited = {slug}
        found = [slug]
        queue = deque([slug])
        while queue:
            current = queue.popleft()
            for source in self.sources_of(current):
                if source in visited:
                    continue
                visited.add(source)
                found.append(source)
                queue.append(source)
        return found


def load_redirects(path: Path) -> RedirectTable:
    """Load a redirect table from a YAML file.

    YAML parse errors and a missing file propagate to the caller.

    Args:
        path: Path to the redirects YAML file

    Returns:
        RedirectTable with edges in file order
    """
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or []
    if not isinstance(raw, list):
        raise RedirectFileError(f"{path}: expected a list of redirects")

    edges = []
    for index, item in enumerate(raw):
        if not isinstance(item, dict):
            raise RedirectFileError(f"{path}: entry {index} is not a mapping")
        source, target = item.get("from"), item.get("to")
        if not isinstance(source, str) or not isinstance(target, str):
            raise RedirectFileError(f"{path}: entry {index} needs string 'from' and 'to'")
        edges.append(RedirectEdge(source=source, target=target))

    logger.info("Loaded %d redirects from %s", len(edges), path)
    return RedirectTable(edges)
