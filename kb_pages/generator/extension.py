"""Python-Markdown extension that routes structural nodes through render rules.

Fenced code never reaches the element tree in Python-Markdown, so it is
handled by a preprocessor that stashes the code rule's output. Fences may sit
inside blockquotes or list items; their ``>`` markers and indent are removed
from the code. Headings, tables, indented code and blockquotes are handled by
a treeprocessor that runs after inline processing and replaces each node with
the stashed HTML returned by the matching rule. Raw inline HTML stashed by
the engine is restored before any text reaches a rule.
"""

from __future__ import annotations

import re
import typing as typ
import xml.etree.ElementTree as etree

from markdown import util
from markdown.extensions import Extension
from markdown.preprocessors import Preprocessor
from markdown.serializers import to_html_string
from markdown.treeprocessors import Treeprocessor

from .models import TableCell

if typ.TYPE_CHECKING:
    from markdown import Markdown
    from markdown.postprocessors import Postprocessor

    from .rules import RenderRules
else:  # pragma: no cover - type-checking fallback
    Markdown = typ.Any
    Postprocessor = typ.Any
    RenderRules = typ.Any

FENCED_BLOCK_PATTERN = re.compile(
    r"^(?P<prefix>(?:[ ]{0,3}>[ ]?)*[ ]*)"
    r"(?P<fence>(?P<char>[`~])(?P=char){2,})[ ]*"
    r"(?P<lang>[A-Za-z0-9_+#.-]+)?[^\n]*\n"
    r"(?P<code>.*?)"
    r"^(?P=prefix)[ ]{0,3}(?P=fence)(?P=char)*[ ]*$",
    re.MULTILINE | re.DOTALL,
)
STASH_PLACEHOLDER_PATTERN = re.compile(util.HTML_PLACEHOLDER % r"[0-9]+")
ALIGN_PATTERN = re.compile(r"text-align:\s*(left|center|right)")
HEADING_LEVELS = {f"h{level}": level for level in range(1, 7)}


class RenderRulesExtension(Extension):
    """Hand headings, tables, code and blockquotes to a :class:`RenderRules`.

    The rules object is shared by the preprocessor and the treeprocessor so a
    single rule set, and whatever state it carries, sees the whole document.
    """

    def __init__(self, rules: RenderRules) -> None:
        super().__init__()
        self.rules = rules

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the fenced-code preprocessor and the rules treeprocessor."""
        md.preprocessors.register(
            RuleFencedCodePreprocessor(md, self.rules), "kb_fenced_code", 25
        )
        md.treeprocessors.register(
            RenderRulesTreeprocessor(md, self.rules), "kb_render_rules", 15
        )


class RuleFencedCodePreprocessor(Preprocessor):
    """Replace fenced code blocks with the code rule's stashed output."""

    def __init__(self, md: Markdown, rules: RenderRules) -> None:
        super().__init__(md)
        self.rules = rules

    def run(self, lines: list[str]) -> list[str]:
        """Return ``lines`` with every fenced block swapped for a placeholder."""
        text = "\n".join(lines)

        def _stash(match: re.Match[str]) -> str:
            prefix = match.group("prefix")
            code = _strip_prefix(match.group("code"), prefix)
            html = self.rules.code(code.removesuffix("\n"), match.group("lang"))
            blank = prefix.rstrip()
            return f"{blank}\n{prefix}{self.md.htmlStash.store(html)}\n{blank}"

        return FENCED_BLOCK_PATTERN.sub(_stash, text).split("\n")


class RenderRulesTreeprocessor(Treeprocessor):
    """Walk the parsed tree in document order and apply the render rules."""

    def __init__(self, md: Markdown, rules: RenderRules) -> None:
        super().__init__(md)
        self.rules = rules
        self._unescape: Treeprocessor | None = None
        self._raw_html: Postprocessor | None = None

    def run(self, root: etree.Element) -> etree.Element:
        """Replace every structural node under ``root`` with rendered HTML."""
        if "unescape" in self.md.treeprocessors:
            self._unescape = self.md.treeprocessors["unescape"]
        if "raw_html" in self.md.postprocessors:
            self._raw_html = self.md.postprocessors["raw_html"]
        self._walk(root)
        return root

    def _walk(self, parent: etree.Element) -> None:
        for index, child in enumerate(list(parent)):
            html = self._dispatch(child)
            if html is not None:
                parent[index] = self._placeholder(html, child.tail)

    def _dispatch(self, element: etree.Element) -> str | None:
        """Return the rule output for ``element``, or ``None`` to keep it."""
        tag = element.tag
        if tag in HEADING_LEVELS:
            return self.rules.heading(self._inner_html(element), HEADING_LEVELS[tag])
        if tag == "table":
            header, rows = self._table_cells(element)
            return self.rules.table(header, rows)
        if tag == "pre" and len(element) and element[0].tag == "code":
            code, language = _code_source(element[0])
            if STASH_PLACEHOLDER_PATTERN.fullmatch(code.strip()):
                # fenced block indented far enough to parse as indented code
                return self._resolve_stash(code.strip())
            return self.rules.code(code, language)
        self._walk(element)
        if tag == "blockquote":
            return self.rules.blockquote(self._blockquote_content(element))
        return None

    def _placeholder(self, html: str, tail: str | None) -> etree.Element:
        """Return a paragraph the raw-HTML postprocessor swaps for ``html``."""
        para = etree.Element("p")
        para.text = self.md.htmlStash.store(html)
        para.tail = tail
        return para

    def _table_cells(
        self, table: etree.Element
    ) -> tuple[list[TableCell], list[list[TableCell]]]:
        head_row = table.find("thead/tr")
        header = [] if head_row is None else [self._cell(c) for c in head_row]
        rows = [[self._cell(c) for c in row] for row in table.iterfind("tbody/tr")]
        return header, rows

    def _cell(self, cell: etree.Element) -> TableCell:
        align = cell.get("align")
        if align is None:
            match = ALIGN_PATTERN.search(cell.get("style", ""))
            align = match.group(1) if match else None
        return TableCell(text=self._inner_html(cell), align=align)

    def _blockquote_content(self, quote: etree.Element) -> str:
        """Return the quote's HTML, unwrapping a lone paragraph."""
        children = list(quote)
        if (
            len(children) == 1
            and children[0].tag == "p"
            and not (quote.text or "").strip()
        ):
            return self._inner_html(children[0])
        return self._inner_html(quote)

    def _inner_html(self, element: etree.Element) -> str:
        """Serialise the content of ``element`` without its own tag."""
        if self._unescape is not None:
            self._unescape.run(element)
        wrapper = etree.Element("div")
        wrapper.text = element.text
        wrapper.extend(element)
        html = to_html_string(wrapper)[len("<div>") : -len("</div>")]
        return self._resolve_stash(html)

    def _resolve_stash(self, html: str) -> str:
        """Swap stash placeholders in ``html`` for the markup they stand for."""
        if self._raw_html is None:
            return html
        return self._raw_html.run(html)


def _code_source(code: etree.Element) -> tuple[str, str | None]:
    """Recover raw text and language from an indented ``<code>`` element."""
    text = code.text or ""
    raw = text.replace("&lt;", "<").replace("&gt;", ">").replace("&amp;", "&")
    css = code.get("class", "")
    language = css.removeprefix("language-") if css.startswith("language-") else None
    return raw.removesuffix("\n"), language or None


def _strip_prefix(code: str, prefix: str) -> str:
    """Remove the blockquote markers and indent of ``prefix`` from each line.

    Lines that carry fewer spaces than ``prefix`` lose what they have, and a
    quote line whose trailing space was trimmed still loses its ``>``.
    """
    if not prefix:
        return code
    marker = prefix.rstrip(" ")
    spaces = len(prefix) - len(marker)
    if marker:
        pattern = rf"^{re.escape(marker)}[ ]{{0,{spaces}}}"
    else:
        pattern = rf"^[ ]{{1,{spaces}}}"
    return re.sub(pattern, "", code, flags=re.MULTILINE)


__all__ = [
    "FENCED_BLOCK_PATTERN",
    "RenderRulesExtension",
    "RenderRulesTreeprocessor",
    "RuleFencedCodePreprocessor",
]
