"""Shared fixtures for arise-setup tests."""

from collections.abc import Iterator
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from arise_setup.project import ProjectContext

INDEX_HTML = """<!DOCTYPE html>
<html>
    <head>
        <meta charset="utf-8">
        <title>Hello World</title>
    </head>
    <body>
        <div class="app"></div>
        <script src="cordova.js"></script>
    </body>
</html>
"""


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """A project as left by `cordova create`: www/index.html exists."""
    root = tmp_path / "app"
    (root / "www").mkdir(parents=True)
    (root / "www" / "index.html").write_text(INDEX_HTML, encoding="utf-8")
    return root


@pytest.fixture
def ctx(project_root: Path) -> ProjectContext:
    """Context with default port and entry."""
    return ProjectContext.from_root(project_root)


@pytest.fixture
def no_cordova() -> Iterator[MagicMock]:
    """Pretend neither cordova nor npx is on PATH."""
    with patch("arise_setup.plugins.base.shutil.which", return_value=None) as mock:
        yield mock
