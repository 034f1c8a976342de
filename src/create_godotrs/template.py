"""Lightweight string templating utilities."""

from __future__ import annotations

import re
from typing import Any, Mapping

__all__ = [
    "TemplateRenderingError",
    "render_string",
]


_PLACEHOLDER_PATTERN = re.compile(r"{{\s*(?P<key>[^{}]+?)\s*}}")


class TemplateRenderingError(RuntimeError):
    """Raised when a placeholder has no value in the context."""


def render_string(template: str, context: Mapping[str, Any]) -> str:
    """Replace every ``{{ key }}`` in ``template`` with ``context[key]``.

    Values are inserted verbatim, so project names with hyphens, digits or
    backslashes come out exactly as given.
    """

    def substitute(match: re.Match[str]) -> str:
        key = match.group("key")
        if key not in context:
            raise TemplateRenderingError(f"missing value for '{key}'")
        return str(context[key])

    return _PLACEHOLDER_PATTERN.sub(substitute, template)
