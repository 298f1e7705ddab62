"""Alphabetical title index over accession records.

Building happens in two phases. The walk collects an immutable IndexEntry
per accession; once every file has been read the entries are sorted and a
second pass produces the linked NavElementViews. Nothing is linked until
the walk is complete, so the order never depends on file read order.

Progress is reported as IndexEvents to an optional observer instead of
being logged here; pass `log_index_event` to get the usual log lines.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from pydantic import ValidationError

from archview.domain.browse.model.nav import NavElementView
from archview.domain.shared.error import EmptyIndexError
from archview.domain.shared.record_file import ACCESSION_MODEL, read_projection, walk_json_files

logger = logging.getLogger(__name__)

SORT_KEY_SEPARATOR = "|"


class IndexEventKind(str, Enum):
    FILE_RECORDED = "file_recorded"
    FILE_SKIPPED = "file_skipped"
    DUPLICATE_URI = "duplicate_uri"
    INDEX_SORTED = "index_sorted"
    INDEX_LINKED = "index_linked"


@dataclass(frozen=True)
class IndexEvent:
    """Something that happened while building an index."""

    kind: IndexEventKind
    path: Path | None = None
    uri: str = ""
    count: int = 0
    reason: str = ""


IndexObserver = Callable[[IndexEvent], None]


@dataclass(frozen=True)
class IndexEntry:
    title: str
    uri: str

    @property
    def sort_key(self) -> str:
        # Title first so ties on title fall back to URI order.
        return f"{self.title}{SORT_KEY_SEPARATOR}{self.uri}"


def _ignore(event: IndexEvent) -> None:
    pass


def collect_entries(root: Path, notify: IndexObserver = _ignore) -> list[IndexEntry]:
    """Walk root and return one entry per accession URI, unsorted.

    Files that can't be read or parsed are reported and skipped. When two
    files claim the same URI the one read last wins.
    """
    entries: dict[str, IndexEntry] = {}
    for path in walk_json_files(root):
        try:
            record = read_projection(path)
        except (OSError, ValidationError) as e:
            notify(IndexEvent(IndexEventKind.FILE_SKIPPED, path=path, reason=str(e)))
            continue
        if record.jsonmodel_type != ACCESSION_MODEL:
            continue
        if record.uri in entries:
            notify(IndexEvent(IndexEventKind.DUPLICATE_URI, path=path, uri=record.uri))
        entries[record.uri] = IndexEntry(title=record.title, uri=record.uri)
        notify(IndexEvent(IndexEventKind.FILE_RECORDED, path=path, uri=record.uri))
    return list(entries.values())


def sort_entries(entries: list[IndexEntry]) -> list[IndexEntry]:
    """Order by title then URI, comparing code points (UTF-8 byte order)."""
    return sorted(entries, key=lambda entry: entry.sort_key)


def link_entries(ordered: list[IndexEntry]) -> dict[str, NavElementView]:
    """Produce a NavElementView per entry, linked to its sorted neighbours."""
    index: dict[str, NavElementView] = {}
    last = len(ordered) - 1
    for i, entry in enumerate(ordered):
        prev = ordered[i - 1] if i > 0 else None
        next_ = ordered[i + 1] if i < last else None
        index[entry.uri] = NavElementView(
            this_label=entry.title,
            this_uri=entry.uri,
            prev_label=prev.title if prev else "",
            prev_uri=prev.uri if prev else "",
            next_label=next_.title if next_ else "",
            next_uri=next_.uri if next_ else "",
            weight=i,
        )
    return index


def build_accession_title_index(
    root: str | Path,
    *,
    observer: IndexObserver | None = None,
) -> dict[str, NavElementView]:
    """Build the browsable title index for every accession under root.

    Args:
        root: Directory to walk recursively.
        observer: Receives an IndexEvent for each recorded or skipped file
            and for the sort and link passes.

    Returns:
        NavElementViews keyed by URI, in sorted order.

    Raises:
        EmptyIndexError: No accession record was found under root.
    """
    root = Path(root)
    notify = observer or _ignore

    entries = collect_entries(root, notify)
    if not entries:
        raise EmptyIndexError(root)

    ordered = sort_entries(entries)
    notify(IndexEvent(IndexEventKind.INDEX_SORTED, path=root, count=len(ordered)))

    index = link_entries(ordered)
    notify(IndexEvent(IndexEventKind.INDEX_LINKED, path=root, count=len(index)))
    return index


def log_index_event(event: IndexEvent) -> None:
    """Observer that writes index progress to the module logger."""
    match event.kind:
        case IndexEventKind.FILE_SKIPPED:
            logger.warning("Can't read accession info %s, %s", event.path, event.reason)
        case IndexEventKind.DUPLICATE_URI:
            logger.warning("Duplicate URI %s in %s, keeping the later file", event.uri, event.path)
        case IndexEventKind.FILE_RECORDED:
            logger.debug("Recorded %s", event.path)
        case IndexEventKind.INDEX_SORTED:
            logger.info("Sorted %d titles", event.count)
        case IndexEventKind.INDEX_LINKED:
            logger.info("Linked %d titles", event.count)
