"""Placeholder substitution for element templates."""

from __future__ import annotations

import re
from typing import Dict, List, Mapping

DEFAULT_TEMPLATE = "{prefix}\n{tag}\n{suffix}"
CHOICE_TEMPLATE = "{prefix}\n{unchecked}\n{tag}\n{label}\n{suffix}"
LABELLED_TEMPLATE = "{prefix}\n{label}\n{tag}\n{suffix}"

PLACEHOLDER_RE = re.compile(r"\{([A-Za-z0-9_\-]+)\}")


def _token_name(key: str) -> str:
    if key.startswith("{") and key.endswith("}"):
        return key[1:-1]
    return key


def _fragment(value: object) -> str:
    if value is None or value is False:
        return ""
    if callable(value) and not hasattr(value, "__html__"):
        return _fragment(value())
    return str(value)


def render_template(template: str, tokens: Mapping[str, object]) -> str:
    """Substitute ``{name}`` placeholders in ``template`` with ``tokens``.

    Substitution is single pass, so fragments are never re-scanned. A line
    that held placeholders and ends up blank is dropped; lines without
    placeholders are kept as written.
    """

    lookup = {_token_name(str(key)): value for key, value in tokens.items()}
    cache: Dict[str, str] = {}

    def replace(match: re.Match[str]) -> str:
        name = match.group(1)
        if name not in cache:
            cache[name] = _fragment(lookup.get(name))
        return cache[name]

    lines: List[str] = []
    for line in template.replace("\\n", "\n").split("\n"):
        if not PLACEHOLDER_RE.search(line):
            lines.append(line)
            continue
        rendered = PLACEHOLDER_RE.sub(replace, line)
        if rendered.strip():
            lines.append(rendered)
    return "\n".join(lines)


__all__ = [
    "CHOICE_TEMPLATE",
    "DEFAULT_TEMPLATE",
    "LABELLED_TEMPLATE",
    "PLACEHOLDER_RE",
    "render_template",
]
