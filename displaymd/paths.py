"""Resolve client-supplied paths without letting them leave the root."""

from pathlib import Path


class PathNotFound(LookupError):
    """Raised for any path that cannot be served.

    The cause (missing, unreadable, outside the root) is deliberately not
    carried, so callers cannot leak it to clients.
    """


def resolve(root: Path, requested: str) -> Path:
    """Join ``requested`` onto ``root`` and return the canonical path.

    ``root`` must already be canonical. The joined path is resolved against
    the real filesystem (symlinks included) and must lie at or below
    ``root`` component-wise, so ``/srv/docs-evil`` never passes for
    ``/srv/docs``.
    """
    try:
        candidate = (root / requested).resolve(strict=True)
    except (OSError, RuntimeError, ValueError):
        raise PathNotFound(requested) from None
    if not candidate.is_relative_to(root):
        raise PathNotFound(requested)
    return candidate

