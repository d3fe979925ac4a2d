"""Configuration schema for arise-setup."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any

from arise_setup.project import DEFAULT_ENTRY, DEFAULT_PORT, MAX_PORT, MIN_PORT


@dataclass(frozen=True)
class SetupConfig:
    """arise-setup configuration schema.

    Fields mirror the CLI options. None means "not set" and is filled in
    from a lower-precedence layer.
    """

    port: int | None = None
    entry: str | None = None
    plugins: bool | None = None  # run `cordova plugin add` for required plugins

    def merge(self, other: SetupConfig) -> SetupConfig:
        """Merge another config into this one.

        Values from `other` take precedence when they are not None.
        Returns a new SetupConfig instance.
        """
        return SetupConfig(
            port=other.port if other.port is not None else self.port,
            entry=other.entry if other.entry is not None else self.entry,
            plugins=other.plugins if other.plugins is not None else self.plugins,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary, omitting None values."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SetupConfig:
        """Create from a dictionary. Unknown keys are ignored.

        Raises:
            ValueError: If a known key holds a value of the wrong type or range.
        """
        port_raw = data.get("port")
        port: int | None = None
        if port_raw is not None:
            if isinstance(port_raw, bool) or not isinstance(port_raw, (int, str)):
                raise ValueError(f"port must be an integer, got {port_raw!r}")
            port = int(port_raw)
            if not MIN_PORT <= port <= MAX_PORT:
                raise ValueError(
                    f"port must be between {MIN_PORT} and {MAX_PORT}, got {port}"
                )

        entry_raw = data.get("entry")
        entry = str(entry_raw) if entry_raw is not None else None

        plugins_raw = data.get("plugins")
        plugins: bool | None = None
        if plugins_raw is not None:
            if not isinstance(plugins_raw, bool):
                raise ValueError(f"plugins must be true or false, got {plugins_raw!r}")
            plugins = plugins_raw

        return cls(port=port, entry=entry, plugins=plugins)


DEFAULT_CONFIG = SetupConfig(
    port=DEFAULT_PORT,
    entry=DEFAULT_ENTRY,
    plugins=True,
)
