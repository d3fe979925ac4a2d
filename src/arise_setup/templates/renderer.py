"""Render the launcher page into www/launcher.html."""

import json
from collections.abc import Mapping
from typing import Any

from arise_setup.files import write_text
from arise_setup.project import ProjectContext
from arise_setup.results import StepResult
from arise_setup.templates.base import TemplateDescriptor
from arise_setup.templates.loader import load_template

LAUNCHER_TEMPLATE = "launcher"
EXTENSION_POINT = "</head>"

# Template variable name -> global exposed to the launcher script
WINDOW_GLOBALS: dict[str, str] = {
    "port": "LAUNCHER_PORT",
    "entry": "LAUNCHER_ENTRY",
}


def _js_literal(value: Any) -> str:
    # "</" would end the surrounding script element early
    return json.dumps(value).replace("</", "<\\/")


def build_script_tag(variables: Mapping[str, Any]) -> str:
    """Build the <script> that exposes the variables as window globals."""
    assignments = "".join(
        f"window.{WINDOW_GLOBALS.get(key, key)}={_js_literal(value)};"
        for key, value in variables.items()
    )
    return f"<script>{assignments}</script>"


def render(descriptor: TemplateDescriptor) -> str:
    """Substitute the descriptor's variables at the first </head>.

    A template without </head> gets the script appended at the end.
    """
    script = build_script_tag(descriptor.variables)
    if EXTENSION_POINT in descriptor.content:
        return descriptor.content.replace(
            EXTENSION_POINT, f"  {script}\n{EXTENSION_POINT}", 1
        )
    return f"{descriptor.content}{script}\n"


def create_launcher(ctx: ProjectContext) -> StepResult:
    """Write www/launcher.html, replacing any previous version."""
    descriptor = load_template(
        LAUNCHER_TEMPLATE, {"port": ctx.port, "entry": ctx.entry}
    )
    write_text(ctx.launcher_html, render(descriptor))
    return StepResult.ok(f"Created/updated {ctx.relative(ctx.launcher_html)}")
