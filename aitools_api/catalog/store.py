"""
In-memory data store for the catalogue API.

The dataset is a JSON array of tool records read once at startup and
wrapped in a ``ToolStore``. The store is never mutated afterwards: it is
attached to the application by ``aitools_api.main.create_app`` and handed
to every request handler, which only reads from it. To serve a different
dataset (for tests, or a newer export) build a store from another file
or from a list of records and pass it to ``create_app``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from pydantic import ValidationError

from .errors import DatasetError
from .schemas import Tool

logger = logging.getLogger(__name__)


class ToolStore:
    """Immutable, ordered collection of tools with a slug index.

    Iteration order is the order of the source dataset; every query
    without an explicit sort preserves it.
    """

    def __init__(self, tools: Iterable[Tool]) -> None:
        self._tools: Tuple[Tool, ...] = tuple(tools)
        by_slug: Dict[str, Tool] = {}
        for tool in self._tools:
            if tool.slug in by_slug:
                raise DatasetError(f"Duplicate tool slug '{tool.slug}'")
            by_slug[tool.slug] = tool
        self._by_slug = by_slug

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> "ToolStore":
        tools: List[Tool] = []
        for index, entry in enumerate(records):
            try:
                tools.append(Tool.model_validate(entry))
            except ValidationError as exc:
                raise DatasetError(f"Invalid tool record at index {index}: {exc}") from exc
        return cls(tools)

    def get(self, slug: str) -> Optional[Tool]:
        return self._by_slug.get(slug)

    def __len__(self) -> int:
        return len(self._tools)

    def __iter__(self) -> Iterator[Tool]:
        return iter(self._tools)


def load_store(path: Path) -> ToolStore:
    """Load the tools dataset from ``path``.

    Parameters
    ----------
    path : Path
        A JSON file holding an array of tool records.

    Returns
    -------
    ToolStore
        The loaded, read-only store.

    Raises
    ------
    DatasetError
        If the file is missing, is not a JSON array, contains a record
        that does not match the ``Tool`` schema, or repeats a slug.
    """
    data_file = Path(path)
    try:
        with data_file.open("r", encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        logger.error("Could not read tools dataset %s: %s", data_file, exc)
        raise DatasetError(f"Could not read tools dataset {data_file}: {exc}") from exc

    if not isinstance(raw, list):
        logger.error("Tools dataset %s is not a JSON array", data_file)
        raise DatasetError(f"Tools dataset {data_file} must contain a JSON array")

    try:
        store = ToolStore.from_records(raw)
    except DatasetError as exc:
        logger.error("Rejected tools dataset %s: %s", data_file, exc)
        raise
    logger.info("Loaded %d tools from %s", len(store), data_file)
    return store
