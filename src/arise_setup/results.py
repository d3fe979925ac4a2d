"""Step and result types shared by the setup pipeline."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from rich.markup import escape

if TYPE_CHECKING:
    from arise_setup.project import ProjectContext


class StepStatus(Enum):
    """Outcome of a single reported step."""

    OK = "ok"
    INFO = "info"
    FATAL = "fatal"


class Idempotency(Enum):
    """How a step treats whatever already exists in the project."""

    MERGE_ON_ABSENCE = "merge-on-absence"  # write only when a marker is missing
    ALWAYS_OVERWRITE = "always-overwrite"  # regenerate unconditionally
    EXTERNAL = "external"  # delegated to an outside tool


STATUS_GLYPHS: dict[StepStatus, str] = {
    StepStatus.OK: "[green]✔[/green]",
    StepStatus.INFO: "[cyan]→[/cyan]",
    StepStatus.FATAL: "[red]✖[/red]",
}


@dataclass(frozen=True)
class StepResult:
    """A single status line produced by a step."""

    status: StepStatus
    message: str

    @classmethod
    def ok(cls, message: str) -> StepResult:
        return cls(StepStatus.OK, message)

    @classmethod
    def info(cls, message: str) -> StepResult:
        return cls(StepStatus.INFO, message)

    @classmethod
    def fatal(cls, message: str) -> StepResult:
        return cls(StepStatus.FATAL, message)

    def render(self) -> str:
        """Format for the rich console, prefixed with the status glyph."""
        return f"{STATUS_GLYPHS[self.status]} {escape(self.message)}"


StepOutput = StepResult | list[StepResult]


@dataclass(frozen=True)
class MutationStep:
    """A named, stateless unit of work applied to a project."""

    name: str
    idempotency: Idempotency
    apply: Callable[[ProjectContext], StepOutput]
