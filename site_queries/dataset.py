"""
In-memory record store for site content.

The query layer only needs grouping and filtering over an ordered set of
records, plus lookup of a model by name. Records are loaded from a YAML
file containing a list of mappings.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
import logging
from pathlib import Path
from typing import Any

import yaml

from .types import Snippet

logger = logging.getLogger(__name__)


class UnknownModelError(KeyError):
    """Raised when a dataset has no model with the requested name."""


class RecordSet:
    """Ordered, read-only collection of records."""

    def __init__(self, records: Iterable[Snippet]):
        self._records = list(records)

    def __iter__(self) -> Iterator[Snippet]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def group_by(self, field_name: str) -> dict[Any, list[Snippet]]:
        """Group records by the value of ``field_name``.

        Groups appear in first-seen order and keep record order within
        each group.
        """
        grouped: dict[Any, list[Snippet]] = {}
        for record in self._records:
            grouped.setdefault(getattr(record, field_name), []).append(record)
        return grouped

    def where(self, predicate: Callable[[Snippet], bool]) -> list[Snippet]:
        """Return records satisfying ``predicate`` in store order."""
        return [record for record in self._records if predicate(record)]


class Model:
    """A named set of records (e.g., "Snippet")."""

    def __init__(self, name: str, records: Iterable[Snippet]):
        self.name = name
        self.records = RecordSet(records)


class Dataset:
    """Holds every model loaded for a build."""

    def __init__(self, models: Iterable[Model] = ()):
        self._models = {model.name: model for model in models}

    def add_model(self, model: Model) -> None:
        self._models[model.name] = model

    def get_model(self, name: str) -> Model:
        try:
            return self._models[name]
        except KeyError:
            raise UnknownModelError(name) from None


def load_snippets(path: Path) -> list[Snippet]:
    """Load snippet records from a YAML list of mappings.

    Args:
        path: Path to the YAML file

    Returns:
        Snippets in file order. An empty file yields an empty list.
    """
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or []
    if not isinstance(raw, list):
        raise ValueError(f"{path}: expected a list of records, got {type(raw).__name__}")
    snippets = [Snippet.from_dict(item) for item in raw]
    logger.info("Loaded %d records from %s", len(snippets), path)
    return snippets
