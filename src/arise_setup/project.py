"""Project context and precondition checks for a Cordova project."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_PORT = 18081
MIN_PORT = 1
MAX_PORT = 65535
DEFAULT_ENTRY = "index.html"


class PreconditionError(Exception):
    """Base exception for failures that must stop the run before mutating."""


class MissingPathError(PreconditionError):
    """Raised when a required project path does not exist."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(message)


class UnreadableDocumentError(PreconditionError):
    """Raised when a document confirmed to exist cannot be read."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Cannot read {path}: {reason}")


@dataclass(frozen=True)
class ProjectContext:
    """Resolved paths and run parameters for one setup run."""

    root: Path
    www_dir: Path
    index_html: Path
    launcher_html: Path
    config_xml: Path
    network_security_xml: Path
    resources_dir: Path
    port: int = DEFAULT_PORT
    entry: str = DEFAULT_ENTRY

    @classmethod
    def from_root(
        cls,
        root: Path | str,
        port: int = DEFAULT_PORT,
        entry: str = DEFAULT_ENTRY,
    ) -> ProjectContext:
        """Build a context from a project root (resolved to an absolute path)."""
        resolved = Path(root).resolve()
        www = resolved / "www"
        return cls(
            root=resolved,
            www_dir=www,
            index_html=www / "index.html",
            launcher_html=www / "launcher.html",
            config_xml=resolved / "config.xml",
            network_security_xml=resolved / "res" / "xml" / "network_security_config.xml",
            resources_dir=resolved / "resources",
            port=port,
            entry=entry,
        )

    def relative(self, path: Path) -> str:
        """Return path relative to the project root, for display."""
        try:
            return path.relative_to(self.root).as_posix()
        except ValueError:
            return str(path)


def locate_project(ctx: ProjectContext) -> None:
    """Validate that the project root, www/ and www/index.html exist.

    Raises:
        MissingPathError: naming the first missing path.
    """
    if not ctx.root.is_dir():
        raise MissingPathError(ctx.root, f"Project path not found: {ctx.root}")
    if not ctx.www_dir.is_dir():
        raise MissingPathError(
            ctx.www_dir, f"Missing www folder at: {ctx.relative(ctx.www_dir)}"
        )
    if not ctx.index_html.is_file():
        raise MissingPathError(
            ctx.index_html,
            f"Missing {ctx.relative(ctx.index_html)}. "
            "Make sure you ran 'cordova create'.",
        )
    logger.debug("Project located at %s", ctx.root)
