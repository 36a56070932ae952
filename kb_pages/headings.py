r"""Heading records, the per-render heading accumulator, and slug generation.

The heading rule appends one :class:`HeadingRecord` per heading it renders to
a :class:`HeadingCollector`. The navigation builder reads the same collector
once the whole document has been parsed, so ids in the sidebar always match
the ``id`` attributes emitted in the body.

Example
-------
>>> from kb_pages.headings import HeadingCollector, slugify
>>> slugify("<em>Setup</em> & Install ✅")
'setup-install'
>>> collector = HeadingCollector()
>>> collector.add(2, "Setup")
HeadingRecord(depth=2, text='Setup', id='setup')
>>> len(collector)
1
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import re
import typing as typ

TAG_PATTERN = re.compile(r"<[^>]+>")
NON_WORD_RUN_PATTERN = re.compile(r"[^\w]+", re.ASCII)


@dc.dataclass(frozen=True, slots=True)
class HeadingRecord:
    """A heading seen during one render.

    Attributes
    ----------
    depth : int
        Heading level from 1 to 6.
    text : str
        Heading text with markup tags removed.
    id : str
        Anchor identifier emitted on the heading element.
    """

    depth: int
    text: str
    id: str


class HeadingCollector(cabc.Sequence[HeadingRecord]):
    """Insertion-ordered accumulator of headings for a single render.

    Records are only ever appended, in the order the parsing engine visits
    heading nodes. No reordering or deduplication happens here: two headings
    with the same text produce two records with the same id.
    """

    def __init__(self) -> None:
        self._records: list[HeadingRecord] = []

    def add(self, depth: int, text: str) -> HeadingRecord:
        """Record a heading and return the stored entry.

        Parameters
        ----------
        depth : int
            Heading level from 1 to 6.
        text : str
            Heading text, possibly containing inline markup.

        Returns
        -------
        HeadingRecord
            The appended record, carrying the tag-stripped text and its slug.
        """
        stripped = strip_tags(text)
        record = HeadingRecord(depth=depth, text=stripped, id=slugify(stripped))
        self._records.append(record)
        return record

    @typ.overload
    def __getitem__(self, index: int) -> HeadingRecord: ...

    @typ.overload
    def __getitem__(self, index: slice) -> cabc.Sequence[HeadingRecord]: ...

    def __getitem__(
        self, index: int | slice
    ) -> HeadingRecord | cabc.Sequence[HeadingRecord]:
        if isinstance(index, slice):
            return tuple(self._records[index])
        return self._records[index]

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"HeadingCollector({self._records!r})"


def strip_tags(text: str) -> str:
    """Remove every ``<...>`` tag from ``text``."""
    return TAG_PATTERN.sub("", text)


def slugify(text: str) -> str:
    """Convert heading text into an anchor identifier.

    Tags are stripped, the text is lower-cased, every run of non-word
    characters becomes a single hyphen, and a leading or trailing hyphen is
    dropped. Word characters are ASCII letters, digits and underscores.

    Parameters
    ----------
    text : str
        Raw heading text, possibly with inline markup.

    Returns
    -------
    str
        The slug. May be empty when the text holds no word characters.
    """
    lowered = strip_tags(text).lower()
    return NON_WORD_RUN_PATTERN.sub("-", lowered).strip("-")


__all__ = ["HeadingCollector", "HeadingRecord", "slugify", "strip_tags"]
