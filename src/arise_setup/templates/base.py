"""Base template definition."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class TemplateDescriptor:
    """A template body plus the variables substituted into it at render time."""

    name: str  # e.g. "launcher"
    content: str
    variables: Mapping[str, Any] = field(default_factory=dict)
    source: Path | None = None  # Path where template was loaded from
