"""Placeholder icon and splash images so a fresh project builds."""

import base64
from pathlib import PurePosixPath

from arise_setup.files import write_bytes
from arise_setup.project import ProjectContext
from arise_setup.results import StepResult

# 1x1 transparent PNG
BLANK_PNG = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR4nGNgYAAAAAMAASsJTYQAAAAASUVORK5CYII="
)

# Paths relative to resources/
PLACEHOLDERS: tuple[str, ...] = (
    "icon.png",
    "splash.png",
    "android/icon-foreground.png",
    "android/icon-background.png",
    "android/splash-icon.png",
)


def seed_placeholders(ctx: ProjectContext) -> StepResult:
    """Write every placeholder image, overwriting existing files."""
    for rel in PLACEHOLDERS:
        write_bytes(ctx.resources_dir.joinpath(*PurePosixPath(rel).parts), BLANK_PNG)
    return StepResult.ok(
        f"Created {ctx.relative(ctx.resources_dir)}/ placeholders (icon/splash)"
    )
