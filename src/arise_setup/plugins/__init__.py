"""Cordova plugin installation through the CLI."""

from collections.abc import Sequence

from arise_setup.plugins.base import (
    InvocationOutcome,
    InvocationStrategy,
    PluginReport,
    ToolInvocationSpec,
)
from arise_setup.plugins.cordova import CORDOVA, NPX_CORDOVA
from arise_setup.plugins.installer import install_all, install_plugin, run_strategy
from arise_setup.project import ProjectContext
from arise_setup.results import StepResult

__all__ = [
    "CORDOVA",
    "DEFAULT_STRATEGIES",
    "InvocationOutcome",
    "InvocationStrategy",
    "NPX_CORDOVA",
    "PluginReport",
    "REQUIRED_PLUGINS",
    "ToolInvocationSpec",
    "build_specs",
    "install_all",
    "install_plugin",
    "install_plugins",
    "run_strategy",
]

REQUIRED_PLUGINS: tuple[str, ...] = (
    "com-darryncampbell-cordova-plugin-intent",
    "cordova-plugin-httpd",
    "cordova-plugin-inappbrowser",
)

# Prefer cordova on PATH, fall back to npx
DEFAULT_STRATEGIES: tuple[InvocationStrategy, ...] = (CORDOVA, NPX_CORDOVA)


def build_specs(
    plugins: Sequence[str] = REQUIRED_PLUGINS,
    strategies: tuple[InvocationStrategy, ...] = DEFAULT_STRATEGIES,
) -> list[ToolInvocationSpec]:
    """Pair every plugin with the ordered strategy list."""
    return [ToolInvocationSpec(plugin_id, strategies) for plugin_id in plugins]


def install_plugins(
    ctx: ProjectContext, plugins: Sequence[str] = REQUIRED_PLUGINS
) -> list[StepResult]:
    """Install the required plugins into the project; one status line each."""
    results: list[StepResult] = []
    for report in install_all(build_specs(plugins), ctx.root):
        if report.installed and report.strategy is not None:
            results.append(
                StepResult.ok(f"Installed {report.plugin_id} ({report.strategy.name})")
            )
        else:
            results.append(
                StepResult.info(f"Skipping (maybe installed): {report.plugin_id}")
            )
    return results
