"""Render markdown into body HTML while collecting headings."""

from __future__ import annotations

import logging
import typing as typ

from markdown import Markdown

from kb_pages.headings import HeadingCollector

from .extension import RenderRulesExtension
from .models import RenderedBody
from .rules import CalloutRenderRules

if typ.TYPE_CHECKING:
    from markdown.extensions import Extension

    from .rules import RenderRules
else:  # pragma: no cover - type-checking fallback
    Extension = typ.Any
    RenderRules = typ.Any

logger = logging.getLogger(__name__)

RulesFactory = typ.Callable[[HeadingCollector], "RenderRules"]


class HtmlContentRenderer:
    """Render markdown with the knowledge-base rule set.

    Every call to :meth:`render` builds a fresh ``Markdown`` instance, a fresh
    :class:`~kb_pages.headings.HeadingCollector` and a fresh rule set, so no
    heading state leaks from one document into the next.
    """

    def __init__(self, rules_factory: RulesFactory = CalloutRenderRules) -> None:
        """Initialize the renderer.

        Parameters
        ----------
        rules_factory : callable, optional
            Builds the :class:`~kb_pages.generator.rules.RenderRules` for a
            render from that render's heading collector. Defaults to
            :class:`~kb_pages.generator.rules.CalloutRenderRules`.
        """
        self.rules_factory = rules_factory

    def render(self, text: str) -> RenderedBody:
        """Convert ``text`` to HTML and return it with the collected headings.

        Parameters
        ----------
        text : str
            Markdown source of the whole document.

        Returns
        -------
        RenderedBody
            Body HTML and the headings in document order. The collector is
            complete when this returns.
        """
        headings = HeadingCollector()
        rules = self.rules_factory(headings)
        extensions: list[Extension | str] = [
            RenderRulesExtension(rules),
            "tables",
            "sane_lists",
            "pymdownx.tilde",
        ]
        md = Markdown(
            extensions=extensions,
            extension_configs={"pymdownx.tilde": {"subscript": False}},
        )
        html = md.convert(text)
        logger.debug("rendered %d characters with %d headings", len(html), len(headings))
        return RenderedBody(html=html, headings=headings)


__all__ = ["HtmlContentRenderer"]
