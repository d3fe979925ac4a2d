"""Install Cordova plugins, falling back between invocation strategies.

A failed `plugin add` usually means the plugin is already there, but exit
status alone cannot tell that apart from a real failure. Every failure is
therefore reported as a skip and never stops the run.
"""

import logging
import subprocess
from collections.abc import Iterable
from pathlib import Path

from arise_setup.plugins.base import (
    InvocationOutcome,
    InvocationStrategy,
    PluginReport,
    ToolInvocationSpec,
)

logger = logging.getLogger(__name__)


def run_strategy(
    strategy: InvocationStrategy, plugin_id: str, cwd: Path
) -> InvocationOutcome:
    """Run `plugin add` through one strategy, blocking until it exits.

    Output is discarded. There is no timeout.
    """
    executable = strategy.resolve()
    if executable is None:
        logger.debug("%s not found in PATH", strategy.executable)
        return InvocationOutcome.NOT_FOUND

    args = strategy.plugin_add_args(plugin_id, executable)
    logger.debug("Running %s in %s", " ".join(args), cwd)
    try:
        result = subprocess.run(
            args,
            cwd=cwd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except OSError as e:
        # Executable vanished or is not runnable between which() and exec
        logger.debug("Could not start %s: %s", strategy.executable, e)
        return InvocationOutcome.NOT_FOUND

    if result.returncode != 0:
        logger.debug("%s exited with %d", " ".join(args), result.returncode)
        return InvocationOutcome.NON_ZERO_EXIT
    return InvocationOutcome.SUCCESS


def install_plugin(spec: ToolInvocationSpec, cwd: Path) -> PluginReport:
    """Try each strategy in order until one succeeds."""
    outcome = InvocationOutcome.NOT_FOUND
    for strategy in spec.strategies:
        outcome = run_strategy(strategy, spec.plugin_id, cwd)
        if outcome is InvocationOutcome.SUCCESS:
            return PluginReport(spec.plugin_id, outcome, strategy)
        logger.info(
            "%s: %s via %s", spec.plugin_id, outcome.value, strategy.name
        )
    return PluginReport(spec.plugin_id, outcome)


def install_all(specs: Iterable[ToolInvocationSpec], cwd: Path) -> list[PluginReport]:
    """Install each plugin independently; no attempt depends on another."""
    return [install_plugin(spec, cwd) for spec in specs]
