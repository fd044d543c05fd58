"""Placeholder substitution and package-name helpers."""

from __future__ import annotations

import re
from collections.abc import Mapping

PLACEHOLDER_PATTERN = re.compile(r"\{([A-Z_]+)\}")

_PACKAGE_NAME = re.compile(r"(@[a-z0-9-]+)/([a-z0-9-]+)")


def replace_placeholders(content: str, values: Mapping[str, str]) -> str:
    """
    Replace every ``{TOKEN}`` in *content* whose key is present in *values*.

    Tokens with no matching key are left verbatim, braces included. Replacement
    values are inserted as-is and never re-scanned.
    """

    def _sub(match: re.Match[str]) -> str:
        key = match.group(1)
        return values[key] if key in values else match.group(0)

    return PLACEHOLDER_PATTERN.sub(_sub, content)


def is_valid_package_name(package_name: str) -> bool:
    """``True`` when *package_name* has the ``@scope/name`` shape."""
    return _PACKAGE_NAME.fullmatch(package_name) is not None


def extract_scope(package_name: str) -> str:
    """Return the ``@scope`` part of *package_name*, or ``""`` when it is invalid."""
    match = _PACKAGE_NAME.fullmatch(package_name)
    return match.group(1) if match else ""


def extract_project_name(package_name: str) -> str:
    """Return the part after ``/``; an invalid *package_name* is returned unchanged."""
    match = _PACKAGE_NAME.fullmatch(package_name)
    return match.group(2) if match else package_name
