"""Template loading from the package-bundled defaults."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from arise_setup.files import read_text
from arise_setup.templates.base import TemplateDescriptor

TEMPLATE_SUFFIX = ".html"


class TemplateNotFoundError(Exception):
    """Raised when a bundled template does not exist."""


def get_package_templates_path() -> Path:
    """Get path to package-bundled default templates."""
    return Path(__file__).parent / "default"


def get_available_template_names() -> list[str]:
    """Return the names of all bundled templates, sorted."""
    base = get_package_templates_path()
    if not base.exists():
        return []
    return sorted(p.stem for p in base.glob(f"*{TEMPLATE_SUFFIX}"))


def load_template(
    name: str, variables: Mapping[str, Any] | None = None
) -> TemplateDescriptor:
    """Load a bundled template by name.

    Args:
        name: Template name without extension (e.g. "launcher").
        variables: Values to substitute when the template is rendered.

    Raises:
        TemplateNotFoundError: If no bundled template has that name.
    """
    path = get_package_templates_path() / f"{name}{TEMPLATE_SUFFIX}"
    if not path.is_file():
        raise TemplateNotFoundError(
            f"Template '{name}' not found. "
            f"Available: {', '.join(get_available_template_names()) or 'none'}"
        )
    return TemplateDescriptor(
        name=name,
        content=read_text(path),
        variables=dict(variables or {}),
        source=path,
    )
