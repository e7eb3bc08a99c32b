"""Recursive markdown discovery."""

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIX = ".md"

# relative posix path -> display name, in ascending path order
FileIndex = dict[str, str]


def is_markdown(name: str) -> bool:
    return name.endswith(MARKDOWN_SUFFIX) and len(name) > len(MARKDOWN_SUFFIX)


def _inside_root(root: Path, path: str) -> bool:
    try:
        return Path(path).resolve(strict=True).is_relative_to(root)
    except (OSError, RuntimeError):
        return False


def _is_utf8(name: str) -> bool:
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def scan(root: Path) -> FileIndex:
    """Walk ``root`` and index every ``*.md`` file beneath it.

    The walk uses an explicit stack, so nesting depth is not bounded by the
    interpreter's recursion limit. Symlinked directories are not descended,
    so every file is listed under its real path, and directories are still
    tracked by device and inode so bind-mount cycles end. File symlinks
    pointing outside ``root`` are ignored, as are names that are not valid
    UTF-8. Unreadable directories are skipped and the rest of the tree is
    still indexed.
    """
    found: dict[str, str] = {}
    visited: set[tuple[int, int]] = set()
    stack = [str(root)]

    while stack:
        directory = stack.pop()
        try:
            st = os.stat(directory)
            key = (st.st_dev, st.st_ino)
            if key in visited:
                logger.debug("already visited %s", directory)
                continue
            visited.add(key)
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as exc:
            logger.debug("skipping unreadable directory %s: %s", directory, exc)
            continue

        subdirs = []
        for entry in entries:
            try:
                is_dir = entry.is_dir()
                is_file = not is_dir and entry.is_file()
                if entry.is_symlink():
                    if is_dir:
                        # the real directory is indexed under its own path
                        logger.debug("not descending into symlink %s", entry.path)
                        continue
                    if not _inside_root(root, entry.path):
                        logger.debug("ignoring symlink leaving root: %s", entry.path)
                        continue
            except OSError as exc:
                logger.debug("skipping %s: %s", entry.path, exc)
                continue

            if is_dir:
                subdirs.append(entry.path)
            elif is_file and is_markdown(entry.name):
                relative = Path(entry.path).relative_to(root).as_posix()
                if not _is_utf8(relative):
                    logger.debug("skipping undecodable name %r", relative)
                    continue
                found[relative] = entry.name[: -len(MARKDOWN_SUFFIX)]

        # depth-first, in name order
        stack.extend(reversed(subdirs))

    return {path: found[path] for path in sorted(found)}


def first_entry(index: FileIndex) -> str | None:
    """Smallest relative path in the index, or None when it is empty."""
    return next(iter(index), None)
