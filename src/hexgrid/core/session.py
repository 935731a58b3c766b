"""Load paths for the viewer.

Rows and the structure report are produced independently. Neither failure is
fatal: an unreadable file gives an empty RowStore, an undecodable one gives a
report error.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from hexgrid.core.io import LoadError, load
from hexgrid.core.store import RowStore
from hexgrid.core.structure import (
    StructuralParseError,
    StructureReport,
    format_report,
    read_structure,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadResult:
    path: str | None
    store: RowStore
    size: int = 0
    error: str | None = None


@dataclass(frozen=True)
class StructureOutcome:
    report: StructureReport | None = None
    error: str | None = None

    def text(self) -> str:
        if self.report is not None:
            return format_report(self.report)
        return f"structure: {self.error}"


def load_rows(path: str | None) -> LoadResult:
    """Build a RowStore for `path`; None or an unreadable path gives an empty store."""
    if path is None:
        return LoadResult(path=None, store=RowStore.empty())
    try:
        data = load(path)
    except LoadError as e:
        logger.warning("could not load %s: %s", path, e)
        return LoadResult(path=path, store=RowStore.empty(), error=str(e))
    store = RowStore.from_buffer(data)
    logger.info("%s: %d bytes, %d rows", path, len(data), len(store))
    return LoadResult(path=path, store=store, size=len(data))


def analyze_structure(path: str) -> StructureOutcome:
    try:
        report = read_structure(path)
    except StructuralParseError as e:
        logger.info("structure parse failed for %s: %s", path, e)
        return StructureOutcome(error=str(e))
    return StructureOutcome(report=report)
