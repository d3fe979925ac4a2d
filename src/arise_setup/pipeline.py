"""Ordered setup pipeline and its driver."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from rich.markup import escape

from arise_setup.assets import seed_placeholders
from arise_setup.console import console, err_console
from arise_setup.descriptors import write_config_xml, write_network_security_config
from arise_setup.inject import inject_csp
from arise_setup.plugins import install_plugins
from arise_setup.project import PreconditionError, ProjectContext, locate_project
from arise_setup.results import Idempotency, MutationStep, StepResult, StepStatus
from arise_setup.templates import create_launcher

logger = logging.getLogger(__name__)

PLUGINS_STEP = "plugins"

STEPS: tuple[MutationStep, ...] = (
    MutationStep("csp", Idempotency.MERGE_ON_ABSENCE, inject_csp),
    MutationStep("launcher", Idempotency.ALWAYS_OVERWRITE, create_launcher),
    MutationStep(PLUGINS_STEP, Idempotency.EXTERNAL, install_plugins),
    MutationStep(
        "network-security-config",
        Idempotency.ALWAYS_OVERWRITE,
        write_network_security_config,
    ),
    MutationStep("config-xml", Idempotency.ALWAYS_OVERWRITE, write_config_xml),
    MutationStep("placeholders", Idempotency.ALWAYS_OVERWRITE, seed_placeholders),
)


@dataclass(frozen=True)
class PipelineResult:
    """Outcome of a whole run; the CLI maps it to an exit code."""

    ok: bool
    results: tuple[StepResult, ...] = ()
    error: str | None = None

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1


@dataclass
class _Report:
    results: list[StepResult] = field(default_factory=list)

    def add(self, result: StepResult) -> None:
        self.results.append(result)
        out = err_console if result.status is StepStatus.FATAL else console
        out.print(result.render())


def _skip_plugins(ctx: ProjectContext) -> StepResult:
    return StepResult.info("Skipping plugin installation (--no-plugins)")


def select_steps(with_plugins: bool = True) -> tuple[MutationStep, ...]:
    """Return the pipeline steps, with plugin installation stubbed out if disabled."""
    if with_plugins:
        return STEPS
    return tuple(
        MutationStep(step.name, step.idempotency, _skip_plugins)
        if step.name == PLUGINS_STEP
        else step
        for step in STEPS
    )


def print_banner(ctx: ProjectContext) -> None:
    console.print(
        f"\n[bold]arise-setup[/bold]\nProject: {escape(str(ctx.root))}\n"
        f"Port: {ctx.port}\nEntry: {escape(ctx.entry)}\n"
    )


def print_next_steps(ctx: ProjectContext) -> None:
    """Tell the user where their build goes and how to build the app."""
    console.print("\n[bold green]✅ Done.[/bold green]")
    console.print("Next steps:")
    console.print("  1) Put your WebVR build under www/web/ and ensure your entry exists:")
    console.print(f"     [cyan]www/web/{escape(ctx.entry)}[/cyan]")
    console.print(
        "  2) Use launcher.html as your start page (or keep index.html and link to it)."
    )
    console.print("  3) Build:")
    console.print("     [cyan]cordova platform add android[/cyan]")
    console.print("     [cyan]cordova build android[/cyan]\n")


def run_pipeline(
    ctx: ProjectContext,
    steps: Sequence[MutationStep] = STEPS,
) -> PipelineResult:
    """Validate the project, then apply every step in order.

    A PreconditionError, from the project check or from any step, ends the
    run at once. Nothing already written is rolled back.
    """
    report = _Report()
    print_banner(ctx)

    try:
        locate_project(ctx)
        for step in steps:
            logger.debug("Applying step %s (%s)", step.name, step.idempotency.value)
            output = step.apply(ctx)
            for result in output if isinstance(output, list) else [output]:
                report.add(result)
    except PreconditionError as e:
        logger.debug("Precondition failed", exc_info=True)
        report.add(StepResult.fatal(str(e)))
        return PipelineResult(ok=False, results=tuple(report.results), error=str(e))

    print_next_steps(ctx)
    return PipelineResult(ok=True, results=tuple(report.results))
