"""Status badge classification from marker glyphs in heading text."""

from __future__ import annotations

import enum
import re

from ._constants import COMPLETED_MARKER, PENDING_MARKER

MARKER_PATTERNS = (
    re.compile(rf"{COMPLETED_MARKER}\s*"),
    re.compile(rf"{PENDING_MARKER}\s*"),
)


class BadgeKind(enum.Enum):
    """Status inferred from the marker glyphs in a piece of text."""

    COMPLETED = "completed"
    PENDING = "pending"
    NONE = "none"


_HEADING_BADGES = {
    BadgeKind.COMPLETED: '<span class="badge badge-completed">Completed</span>',
    BadgeKind.PENDING: '<span class="badge badge-pending">Pending</span>',
    BadgeKind.NONE: "",
}

_NAV_BADGES = {
    BadgeKind.COMPLETED: '<span class="badge-sm badge-green">done</span>',
    BadgeKind.PENDING: '<span class="badge-sm badge-amber">wip</span>',
    BadgeKind.NONE: "",
}


def classify_badge(text: str) -> BadgeKind:
    """Return the badge kind for ``text``; the completed marker wins over pending."""
    if COMPLETED_MARKER in text:
        return BadgeKind.COMPLETED
    if PENDING_MARKER in text:
        return BadgeKind.PENDING
    return BadgeKind.NONE


def heading_badge(kind: BadgeKind) -> str:
    """Return the full badge markup shown next to a heading."""
    return _HEADING_BADGES[kind]


def nav_badge(kind: BadgeKind) -> str:
    """Return the compact badge markup shown inside a sidebar link."""
    return _NAV_BADGES[kind]


def strip_badge_markers(text: str) -> str:
    """Remove every marker glyph, and the whitespace after it, from ``text``."""
    for pattern in MARKER_PATTERNS:
        text = pattern.sub("", text)
    return text


__all__ = [
    "BadgeKind",
    "classify_badge",
    "heading_badge",
    "nav_badge",
    "strip_badge_markers",
]
