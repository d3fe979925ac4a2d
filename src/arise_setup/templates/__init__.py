"""Bundled page templates and the launcher renderer."""

from arise_setup.templates.base import TemplateDescriptor
from arise_setup.templates.loader import (
    TemplateNotFoundError,
    get_available_template_names,
    get_package_templates_path,
    load_template,
)
from arise_setup.templates.renderer import create_launcher, render

__all__ = [
    "TemplateDescriptor",
    "TemplateNotFoundError",
    "create_launcher",
    "get_available_template_names",
    "get_package_templates_path",
    "load_template",
    "render",
]
