"""Base definitions for invoking the Cordova CLI."""

from __future__ import annotations

import shutil
from dataclasses import dataclass
from enum import Enum


class InvocationOutcome(Enum):
    """Result of one attempt to run an external command."""

    SUCCESS = "success"
    NON_ZERO_EXIT = "non-zero-exit"
    NOT_FOUND = "not-found"


@dataclass(frozen=True)
class InvocationStrategy:
    """One concrete way of reaching the Cordova CLI."""

    name: str
    command: tuple[str, ...]  # argv prefix, e.g. ("npx", "cordova")

    @property
    def executable(self) -> str:
        return self.command[0]

    def resolve(self) -> str | None:
        """Full path of the executable from PATH, or None if missing."""
        return shutil.which(self.executable)

    def plugin_add_args(
        self, plugin_id: str, executable: str | None = None
    ) -> list[str]:
        """Full argv for `plugin add <plugin_id>`.

        Passing the resolved executable lets npm's .cmd shims start on Windows.
        """
        program = executable or self.executable
        return [program, *self.command[1:], "plugin", "add", plugin_id]


@dataclass(frozen=True)
class ToolInvocationSpec:
    """A plugin to install and the strategies to try, in order."""

    plugin_id: str
    strategies: tuple[InvocationStrategy, ...]


@dataclass(frozen=True)
class PluginReport:
    """What happened when installing one plugin."""

    plugin_id: str
    outcome: InvocationOutcome
    strategy: InvocationStrategy | None = None  # the one that succeeded

    @property
    def installed(self) -> bool:
        return self.outcome is InvocationOutcome.SUCCESS
