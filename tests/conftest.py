"""Shared fixtures for arfrigate tests."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Create a standard test directory tree.

    Structure::

        root/
        ├── docs/
        │   └── readme
        ├── src/
        │   ├── lib/
        │   │   └── mod.x
        │   ├── main.py
        │   └── notes.txt
        ├── a.txt
        ├── a.md
        └── secret.txt
    """
    (tmp_path / "docs").mkdir()
    (tmp_path / "docs" / "readme").write_text("readme")
    (tmp_path / "src" / "lib").mkdir(parents=True)
    (tmp_path / "src" / "lib" / "mod.x").write_text("mod")
    (tmp_path / "src" / "main.py").write_text("main")
    (tmp_path / "src" / "notes.txt").write_text("notes")
    (tmp_path / "a.txt").write_text("a")
    (tmp_path / "a.md").write_text("a")
    (tmp_path / "secret.txt").write_text("secret")
    return tmp_path


@pytest.fixture
def python_tree(tmp_path: Path) -> Path:
    """Python project tree with build noise.

    Structure::

        root/
        ├── .git/
        │   └── config
        ├── build/
        │   └── lib/
        │       └── pkg.py
        ├── src/
        │   ├── app.py
        │   └── __pycache__/
        │       └── app.cpython-313.pyc
        ├── pyproject.toml
        └── README.md
    """
    (tmp_path / ".git").mkdir()
    (tmp_path / ".git" / "config").write_text("[core]")
    (tmp_path / "build" / "lib").mkdir(parents=True)
    (tmp_path / "build" / "lib" / "pkg.py").write_text("pkg")
    (tmp_path / "src" / "__pycache__").mkdir(parents=True)
    (tmp_path / "src" / "app.py").write_text("app")
    (tmp_path / "src" / "__pycache__" / "app.cpython-313.pyc").write_bytes(b"\x00")
    (tmp_path / "pyproject.toml").write_text("[project]")
    (tmp_path / "README.md").write_text("readme")
    return tmp_path


@pytest.fixture
def gitignore_tree(tmp_path: Path) -> Path:
    """Tree with .gitignore for gitignore-integration testing.

    Structure::

        root/
        ├── .gitignore          (*.pyc, node_modules/)
        ├── node_modules/
        │   └── pkg/
        │       └── index.js
        ├── src/
        │   ├── app.py
        │   └── app.pyc
        └── README.md
    """
    (tmp_path / ".gitignore").write_text("*.pyc\nnode_modules/\n")
    (tmp_path / "node_modules" / "pkg").mkdir(parents=True)
    (tmp_path / "node_modules" / "pkg" / "index.js").write_text("js")
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "app.py").write_text("app")
    (tmp_path / "src" / "app.pyc").write_bytes(b"\x00")
    (tmp_path / "README.md").write_text("readme")
    return tmp_path
