"""Idempotent Content-Security-Policy injection into www/index.html."""

import logging
import re

from arise_setup.files import read_text, write_text
from arise_setup.project import ProjectContext, UnreadableDocumentError
from arise_setup.results import StepResult

logger = logging.getLogger(__name__)

CSP_MARKER = "Content-Security-Policy"
CSP_META = (
    '<meta http-equiv="Content-Security-Policy" '
    "content=\"default-src 'self' data: blob: filesystem: gap: "
    "http://localhost:* http://127.0.0.1:* https://* "
    "'unsafe-inline' 'unsafe-eval';\">"
)

_HEAD_OPEN = re.compile(r"<head(?:\s[^>]*)?>", re.IGNORECASE)


def inject_once(html: str, marker: str, fragment: str) -> str | None:
    """Insert fragment into html unless marker is already present.

    The marker check is a case-insensitive substring match. The fragment goes
    right after the first <head> opening tag; a document without one is
    wrapped in a minimal html/head/body skeleton.

    Returns:
        The new document, or None when nothing needs to change.
    """
    if marker.lower() in html.lower():
        return None

    match = _HEAD_OPEN.search(html)
    if match:
        return f"{html[: match.end()]}\n  {fragment}{html[match.end():]}"

    return (
        "<!doctype html>\n<html>\n<head>\n"
        f"  {fragment}\n"
        "</head>\n<body>\n"
        f"{html}\n"
        "</body>\n</html>\n"
    )


def inject_csp(ctx: ProjectContext) -> StepResult:
    """Add the CSP meta tag to www/index.html if it has none."""
    target = ctx.index_html
    display = ctx.relative(target)
    try:
        html = read_text(target)
    except (OSError, UnicodeDecodeError) as e:
        raise UnreadableDocumentError(target, str(e)) from e

    updated = inject_once(html, CSP_MARKER, CSP_META)
    if updated is None:
        logger.debug("CSP marker found in %s, leaving it untouched", target)
        return StepResult.ok(f"CSP meta already present in {display}")

    write_text(target, updated)
    return StepResult.ok(f"Injected CSP meta into {display}")
