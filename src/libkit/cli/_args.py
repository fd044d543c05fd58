"""Turn free-form ``--kebab-case`` options into library call payloads."""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Any

_KEBAB_SEGMENT = re.compile(r"-(\w)")


def kebab_to_camel(name: str) -> str:
    return _KEBAB_SEGMENT.sub(lambda m: m.group(1).upper(), name)


def coerce(value: str) -> Any:
    """Convert ``true``/``false``/``null`` and numeric strings; anything else stays a string."""
    literals: dict[str, Any] = {"true": True, "false": False, "null": None}
    if value in literals:
        return literals[value]
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError:
        return value


def parse_options(args: Sequence[str]) -> dict[str, Any]:
    """
    Parse ``--key value``, ``--key=value`` and bare ``--flag`` tokens.

    Keys are converted to camelCase. Tokens that are not options are ignored.
    """
    result: dict[str, Any] = {}
    i = 0
    while i < len(args):
        token = args[i]
        i += 1
        if not token.startswith("--") or token == "--":
            continue

        key, sep, raw = token[2:].partition("=")
        if sep:
            value: Any = coerce(raw)
        elif i < len(args) and not args[i].startswith("--"):
            value = coerce(args[i])
            i += 1
        else:
            value = True
        result[kebab_to_camel(key)] = value
    return result
