"""Placeholder substitution for the Dart template catalog."""

from __future__ import annotations

import re
from typing import Mapping

__all__ = ["TemplateRenderingError", "render_template"]


# Only ``{{`` opens a placeholder so Dart's single braces pass through.
_PLACEHOLDER_PATTERN = re.compile(r"{{\s*(?P<key>\w+)\s*}}")


class TemplateRenderingError(RuntimeError):
    """Raised when a template refers to a value that was not provided."""


def render_template(template: str, context: Mapping[str, str]) -> str:
    """Replace every ``{{ key }}`` in ``template`` with ``context[key]``."""

    def substitute(match: re.Match[str]) -> str:
        key = match.group("key")
        try:
            return context[key]
        except KeyError as exc:
            raise TemplateRenderingError(f"missing value for '{key}'") from exc

    return _PLACEHOLDER_PATTERN.sub(substitute, template)
