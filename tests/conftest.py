"""Shared pytest fixtures for the create-fullstack-app test suite.

Provides reusable fixtures for:
- Fake frontend and backend template trees under ``tmp_path``
- A ``Config`` pointing at those trees
- A quiet Rich console so test output stays readable
- Pipeline collaborators (environment check, prompts, installer)
"""

from __future__ import annotations

import io
import json
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from rich.console import Console

from create_fullstack_app.config import Config


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def make_template(root: Path, kind: str, files: dict[str, str]) -> Path:
    """Create ``root/kind`` containing *files* (relative path -> content)."""
    template_dir = root / kind
    for rel, content in files.items():
        path = template_dir / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    template_dir.mkdir(parents=True, exist_ok=True)
    return template_dir


FRONTEND_MANIFEST: dict[str, Any] = {
    "name": "a",
    "version": "0.1.0",
    "dependencies": {"x": "1"},
    "scripts": {"start": "react-scripts start"},
    "files": ["src"],
}

BACKEND_MANIFEST: dict[str, Any] = {
    "name": "b",
    "dependencies": {"y": "2"},
    "scripts": {"server": "node server/index.js"},
    "files": ["server"],
}

FRONTEND_FILES: dict[str, str] = {
    "package.json": json.dumps(FRONTEND_MANIFEST),
    "README.md": "A",
    "gitignore": "/node_modules\n",
    "public/index.html": "<div id=\"root\"></div>\n",
    "src/index.js": "console.log('frontend');\n",
    "src/components/package.json": "{}",
    "node_modules/left-pad/index.js": "module.exports = 1;\n",
    "coverage/lcov.info": "TN:\n",
    "build/bundle.js": "bundle\n",
}

BACKEND_FILES: dict[str, str] = {
    "package.json": json.dumps(BACKEND_MANIFEST),
    "README.md": "B",
    "gitignore": "/node_modules\nlogs\n",
    "server/index.js": "console.log('server');\n",
    "server/users/user.model.js": "module.exports = {};\n",
}


# ---------------------------------------------------------------------------
# Templates & Config
# ---------------------------------------------------------------------------

@pytest.fixture
def templates_dir(tmp_path: Path) -> Path:
    """Templates root with one frontend (react-js) and one backend (mongodb-server)."""
    root = tmp_path / "templates"
    make_template(root, "react-js", FRONTEND_FILES)
    make_template(root, "mongodb-server", BACKEND_FILES)
    return root


@pytest.fixture
def config(templates_dir: Path) -> Config:
    """Config pointing at the fake templates, with install enabled."""
    return Config(templates_dir=templates_dir)


@pytest.fixture
def work_dir(tmp_path: Path) -> Path:
    """Directory the generated project is created in."""
    path = tmp_path / "work"
    path.mkdir()
    return path


# ---------------------------------------------------------------------------
# Console
# ---------------------------------------------------------------------------

@pytest.fixture
def quiet_console() -> Console:
    """Rich console writing to an in-memory buffer."""
    return Console(file=io.StringIO(), width=120, color_system=None)


@pytest.fixture(autouse=True)
def _silence_console(quiet_console: Console):
    """Route every module-level console print into the in-memory buffer."""
    with patch("create_fullstack_app.utils.console", quiet_console), \
         patch("create_fullstack_app.pipeline.console", quiet_console), \
         patch("create_fullstack_app.scaffolder.generator.console", quiet_console):
        yield quiet_console


# ---------------------------------------------------------------------------
# Pipeline collaborators
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_checker() -> MagicMock:
    """Environment check that always finds the package manager."""
    checker = MagicMock()
    checker.verify = AsyncMock(return_value="1.22.19")
    return checker


@pytest.fixture
def mock_prompts() -> MagicMock:
    """Prompt provider answering react-js / mongodb-server."""
    prompts = MagicMock()
    prompts.choose_frontend.return_value = "react-js"
    prompts.choose_database.return_value = "mongodb-server"
    return prompts


@pytest.fixture
def mock_installer() -> MagicMock:
    """Installer that records ``detach`` calls instead of spawning."""
    return MagicMock()
