"""Identifier helpers shared by the renderers."""

import re

_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")


def to_snake_case(name: str) -> str:
    """Convert a CamelCase Go identifier to snake_case.

    Runs of capitals are kept together as one word, so ``UserID`` becomes
    ``user_id`` and ``HTTPServer`` becomes ``http_server``.
    """
    name = _ACRONYM_BOUNDARY.sub(r"\1_\2", name)
    name = _WORD_BOUNDARY.sub(r"\1_\2", name)
    return name.lower()
