"""Shared fixtures: a small markdown tree and an app serving it."""

from pathlib import Path

import pytest

from displaymd import create_app, load_settings


@pytest.fixture
def docs_root(tmp_path: Path) -> Path:
    """Create a docs tree next to a sibling directory sharing its name prefix."""
    root = tmp_path / "docs"
    (root / "sub" / "dir").mkdir(parents=True)
    (root / "a.md").write_text("# A\n", encoding="utf-8")
    (root / "b.md").write_text("# B\n", encoding="utf-8")
    (root / "README.md").write_text("# Readme\n", encoding="utf-8")
    (root / "notes.txt").write_text("not markdown", encoding="utf-8")
    (root / "sub" / "dir" / "notes.md").write_text("deep notes\n", encoding="utf-8")

    evil = tmp_path / "docs-evil"
    evil.mkdir()
    (evil / "x.md").write_text("secret", encoding="utf-8")
    return root.resolve()


@pytest.fixture
def client(docs_root: Path):
    app = create_app(load_settings(docs_root))
    app.config["TESTING"] = True
    return app.test_client()
