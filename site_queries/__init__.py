"""
Site Queries - memoized read-side queries for a static site build.

This package answers aggregate and filtered questions over the site's
content records and resolves legacy redirect chains, computing each
distinct query once per build.

Main entry point is the CLI via the `site-queries` command.

Example:
    $ site-queries alternatives /js/s/bifurcate-by
"""

__all__ = [
    "__version__",
    "FilterSpec",
    "PreparedQueries",
    "QueryCache",
    "RedirectTable",
    "Snippet",
    "build_queries",
]
__version__ = "0.1.0"

from .cache import QueryCache
from .queries import PreparedQueries, build_queries
from .redirects import RedirectTable
from .types import FilterSpec, Snippet
