"""Parsing of the ``github-provider-map`` setting.

The map translates GitHub logins into chat identifiers so reminders can
mention people directly, e.g. ``"alice:U024BE7LH, bob:U0G9QF9C6"``.
"""

from __future__ import annotations

import re

_IDENT = r"[A-Za-z0-9_\-@.]+"
_ENTRY = rf"{_IDENT}:{_IDENT}"
_MAP_RE = re.compile(rf"{_ENTRY}(\s*,\s*{_ENTRY})*")


def validate_provider_map(text: str) -> bool:
    """Return True if ``text`` is a comma-separated list of ``login:id`` pairs."""
    return _MAP_RE.fullmatch(text or "") is not None


def parse_provider_map(text: str | None) -> dict[str, str]:
    """Convert ``"name1:ID1,name2:ID2"`` into ``{"name1": "ID1", "name2": "ID2"}``.

    No format check is done here; call validate_provider_map() first when it
    matters. A login listed twice keeps its last id.
    """
    mapping: dict[str, str] = {}
    if not text:
        return mapping
    for entry in re.sub(r"\s+", "", text).split(","):
        login, _, chat_id = entry.partition(":")
        mapping[login] = chat_id
    return mapping
