from __future__ import annotations

from kb_pages.badges import BadgeKind
from kb_pages.config import NavConfig
from kb_pages.generator.models import NavEntry
from kb_pages.generator.navigation import build_nav, build_nav_entries, render_nav
from kb_pages.headings import HeadingCollector


def _collect(*items: tuple[int, str]) -> HeadingCollector:
    headings = HeadingCollector()
    for depth, text in items:
        headings.add(depth, text)
    return headings


def test_groups_and_links_interleave_in_document_order() -> None:
    headings = _collect(
        (1, "Platform"),
        (2, "Auth ✅"),
        (3, "Tokens"),
        (2, "Billing ⏳"),
        (1, "Clients"),
        (2, "Mobile"),
    )

    entries = build_nav_entries(headings)

    assert entries == [
        NavEntry(kind="group", label="Platform"),
        NavEntry(
            kind="link",
            label="Auth ",
            target="auth",
            badge=BadgeKind.COMPLETED,
            group="Platform",
        ),
        NavEntry(
            kind="link",
            label="Billing ",
            target="billing",
            badge=BadgeKind.PENDING,
            group="Platform",
        ),
        NavEntry(kind="group", label="Clients"),
        NavEntry(kind="link", label="Mobile", target="mobile", group="Clients"),
    ]


def test_rendered_sidebar_markup() -> None:
    headings = _collect((1, "Platform"), (2, "Auth ✅"), (2, "Billing ⏳"), (2, "Docs"))

    assert build_nav(headings) == (
        '<span class="nav-group-label">Platform</span>\n'
        '<a href="#auth">Auth <span class="badge-sm badge-green">done</span></a>\n'
        '<a href="#billing">Billing <span class="badge-sm badge-amber">wip</span></a>\n'
        '<a href="#docs">Docs</a>\n'
    )


def test_links_before_any_group_have_no_group() -> None:
    entries = build_nav_entries(_collect((2, "Preface"), (1, "Body")))
    assert entries[0].group is None
    assert entries[0].target == "preface"


def test_deeper_headings_are_not_listed() -> None:
    headings = _collect((3, "Deep"), (4, "Deeper"), (6, "Deepest"))
    assert build_nav_entries(headings) == []
    assert build_nav(headings) == ""


def test_labels_are_hard_cut_without_ellipsis() -> None:
    group_text = "G" * 45
    link_text = "L" * 40
    entries = build_nav_entries(_collect((1, group_text), (2, link_text)))

    assert entries[0].label == "G" * 40
    assert entries[1].label == "L" * 35
    assert "…" not in render_nav(entries)
    assert entries[1].group == group_text


def test_group_labels_keep_markers_but_links_drop_them() -> None:
    entries = build_nav_entries(_collect((1, "Done ✅"), (2, "⏳ Pending work")))
    assert entries[0].label == "Done ✅"
    assert entries[1].label == "Pending work"
    assert entries[1].badge is BadgeKind.PENDING


def test_link_markup_is_rendered_from_collected_text() -> None:
    headings = _collect((2, "Use <code>make</code> &amp; test"))
    assert build_nav(headings) == '<a href="#use-make-amp-test">Use make &amp; test</a>\n'


def test_custom_limits_apply() -> None:
    config = NavConfig(group_label_limit=5, link_label_limit=3)
    entries = build_nav_entries(_collect((1, "Overview"), (2, "Setup ✅")), config)
    assert [entry.label for entry in entries] == ["Overv", "Set"]
    assert entries[1].badge is BadgeKind.COMPLETED


def test_every_link_targets_a_collected_id() -> None:
    headings = _collect((1, "A"), (2, "B c"), (2, "D-e"), (3, "F"), (2, "B c"))
    ids = {heading.id for heading in headings}
    targets = [e.target for e in build_nav_entries(headings) if e.kind == "link"]
    assert targets == ["b-c", "d-e", "b-c"]
    assert set(targets) <= ids
