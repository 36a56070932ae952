"""Shared dataclasses used by the page rendering pipeline."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path  # noqa: TC003 - used for runtime type metadata

from kb_pages.badges import BadgeKind
from kb_pages.headings import HeadingCollector  # noqa: TC001 - runtime field type


@dc.dataclass(frozen=True, slots=True)
class TableCell:
    """A table cell as handed to the table rule.

    Attributes
    ----------
    text : str
        Cell content as an HTML fragment, already sanitised by the parser.
    align : str or None
        ``"left"``, ``"center"`` or ``"right"`` when the column declares an
        alignment; ``None`` otherwise.
    """

    text: str
    align: str | None = None


@dc.dataclass(frozen=True, slots=True)
class NavEntry:
    """A single sidebar entry derived from a heading.

    Attributes
    ----------
    kind : {"group", "link"}
        Group labels come from depth-1 headings, links from depth-2 headings.
    label : str
        Truncated label text.
    target : str or None
        Anchor id the link points at; ``None`` for group labels.
    badge : BadgeKind
        Status badge shown next to a link.
    group : str or None
        Full text of the group label the link sits under, if any.
    """

    kind: typ.Literal["group", "link"]
    label: str
    target: str | None = None
    badge: BadgeKind = BadgeKind.NONE
    group: str | None = None


@dc.dataclass(slots=True)
class RenderedBody:
    """Body HTML together with the headings collected while producing it."""

    html: str
    headings: HeadingCollector


@dc.dataclass(frozen=True, slots=True)
class RenderedDocument:
    """Parts of the final page, assembled once per pipeline run."""

    title: str
    body_html: str
    nav_html: str


@dc.dataclass(frozen=True, slots=True)
class GenerationResult:
    """Where a page was written and how large it is."""

    path: Path
    size_bytes: int

    @property
    def size_kb(self) -> int:
        """Return the size in kilobytes, rounded half-up."""
        return int(self.size_bytes / 1024 + 0.5)


__all__ = [
    "GenerationResult",
    "NavEntry",
    "RenderedBody",
    "RenderedDocument",
    "TableCell",
]
