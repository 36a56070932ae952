"""Derive the sidebar navigation from the collected headings.

Depth-1 headings become group labels and depth-2 headings become links;
deeper headings keep their in-page anchors but get no sidebar entry.

Example
-------
>>> from kb_pages.headings import HeadingCollector
>>> headings = HeadingCollector()
>>> _ = headings.add(1, "Guide")
>>> _ = headings.add(2, "Setup ✅")
>>> print(build_nav(headings), end="")
<span class="nav-group-label">Guide</span>
<a href="#setup">Setup <span class="badge-sm badge-green">done</span></a>
"""

from __future__ import annotations

import typing as typ

from kb_pages.badges import classify_badge, nav_badge, strip_badge_markers
from kb_pages.config.models import NavConfig

from .models import NavEntry

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from kb_pages.headings import HeadingRecord


def build_nav_entries(
    headings: cabc.Iterable[HeadingRecord], nav_config: NavConfig | None = None
) -> list[NavEntry]:
    """Return sidebar entries for ``headings`` in their original order.

    Parameters
    ----------
    headings : Iterable[HeadingRecord]
        The complete, ordered heading list of a render.
    nav_config : NavConfig, optional
        Label truncation limits; defaults to 40 characters for group labels
        and 35 for links.

    Returns
    -------
    list[NavEntry]
        One entry per depth-1 or depth-2 heading. Labels are hard-cut at the
        configured limit without an ellipsis.
    """
    config = nav_config or NavConfig()
    entries: list[NavEntry] = []
    current_group: str | None = None
    for heading in headings:
        if heading.depth == 1:
            current_group = heading.text
            entries.append(
                NavEntry(kind="group", label=heading.text[: config.group_label_limit])
            )
        elif heading.depth == 2:
            label = strip_badge_markers(heading.text)[: config.link_label_limit]
            entries.append(
                NavEntry(
                    kind="link",
                    label=label,
                    target=heading.id,
                    badge=classify_badge(heading.text),
                    group=current_group,
                )
            )
    return entries


def render_nav(entries: cabc.Iterable[NavEntry]) -> str:
    """Render entries as sidebar markup, one element per line."""
    lines: list[str] = []
    for entry in entries:
        if entry.kind == "group":
            lines.append(f'<span class="nav-group-label">{entry.label}</span>\n')
        else:
            badge = nav_badge(entry.badge)
            lines.append(f'<a href="#{entry.target}">{entry.label}{badge}</a>\n')
    return "".join(lines)


def build_nav(
    headings: cabc.Iterable[HeadingRecord], nav_config: NavConfig | None = None
) -> str:
    """Return the sidebar markup for a completed heading list."""
    return render_nav(build_nav_entries(headings, nav_config))


__all__ = ["build_nav", "build_nav_entries", "render_nav"]
