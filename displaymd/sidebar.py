"""Navigation list built from a file index."""

from dataclasses import dataclass

from displaymd.indexer import FileIndex


@dataclass(frozen=True)
class NavEntry:
    path: str
    name: str
    active: bool = False


def build_sidebar(index: FileIndex, current: str) -> list[NavEntry]:
    """One entry per indexed file; only the entry equal to ``current`` is active."""
    return [NavEntry(path, name, path == current) for path, name in index.items()]
