"""High-level orchestration for knowledge-base page generation.

This module ties the pipeline together: it reads markdown from a file or a
URL, renders the body with :class:`HtmlContentRenderer` (which fills the
heading list as a side effect), derives the sidebar from the completed
heading list, assembles the page with the shared Jinja template, and writes
the HTML once it is fully built in memory.

Example
-------
>>> from pathlib import Path
>>> from kb_pages.generator import PageContentGenerator
>>> generator = PageContentGenerator("docs/roadmap.md", Path("roadmap.html"))  # doctest: +SKIP
>>> generator.run()  # doctest: +SKIP
GenerationResult(path=PosixPath('roadmap.html'), size_bytes=18342)
"""

from __future__ import annotations

import logging
import re
from pathlib import Path, PurePosixPath
from urllib.parse import urlsplit

import requests
from jinja2 import Environment, FileSystemLoader
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from kb_pages.config import SiteConfig

from .models import GenerationResult, RenderedDocument
from .navigation import build_nav
from .renderer import HtmlContentRenderer

logger = logging.getLogger(__name__)

URL_PREFIXES = ("http://", "https://")
WORD_START_PATTERN = re.compile(r"\b\w", re.ASCII)


class DocumentAssembler:
    """Wrap rendered body and navigation markup in the page template."""

    def __init__(
        self, config: SiteConfig | None = None, *, templates_dir: Path | None = None
    ) -> None:
        """Initialize the assembler and its Jinja environment.

        Parameters
        ----------
        config : SiteConfig, optional
            Supplies the brand shown in the title and sidebar; defaults to
            ``SiteConfig()``.
        templates_dir : Path, optional
            Directory containing ``doc_page.jinja`` and ``doc_page.css``;
            defaults to the package templates.
        """
        self.config = config or SiteConfig()
        default_templates = Path(__file__).resolve().parents[1] / "templates"
        self.templates_dir = templates_dir or default_templates
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.template = self.env.get_template("doc_page.jinja")

    def assemble(self, title: str, body_html: str, nav_html: str) -> str:
        """Return the complete HTML page.

        The title, ``body_html`` and ``nav_html`` are interpolated as given;
        only the theme strings are escaped.
        """
        document = RenderedDocument(title=title, body_html=body_html, nav_html=nav_html)
        return self.render(document)

    def render(self, document: RenderedDocument) -> str:
        """Return the complete HTML page for an assembled document."""
        return self.template.render(document=document, theme=self.config.theme)


def render_document(
    markdown_text: str,
    title: str,
    config: SiteConfig | None = None,
    *,
    renderer: HtmlContentRenderer | None = None,
    assembler: DocumentAssembler | None = None,
) -> tuple[RenderedDocument, str]:
    """Run the full pipeline on ``markdown_text`` without touching the disk.

    Parameters
    ----------
    markdown_text : str
        Markdown source of the document.
    title : str
        Document title shown in the page title and sidebar.
    config : SiteConfig, optional
        Theme and navigation settings; defaults to ``SiteConfig()``.
    renderer : HtmlContentRenderer, optional
        Renderer to use; a default one is built when omitted.
    assembler : DocumentAssembler, optional
        Assembler to use; one is built from ``config`` when omitted.

    Returns
    -------
    tuple[RenderedDocument, str]
        The document parts and the final HTML page.
    """
    site_config = config or SiteConfig()
    body = (renderer or HtmlContentRenderer()).render(markdown_text)
    nav_html = build_nav(body.headings, site_config.navigation)
    document = RenderedDocument(title=title, body_html=body.html, nav_html=nav_html)
    page = (assembler or DocumentAssembler(site_config)).render(document)
    return document, page


class PageContentGenerator:
    """Read a markdown source and write the rendered HTML page."""

    def __init__(
        self,
        source: str | Path,
        output_path: Path,
        *,
        title: str | None = None,
        config: SiteConfig | None = None,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the generator.

        Parameters
        ----------
        source : str or Path
            Markdown file path, or an ``http(s)://`` URL to fetch.
        output_path : Path
            Where the HTML page is written.
        title : str, optional
            Document title; derived from the source name when omitted.
        config : SiteConfig, optional
            Theme and navigation settings; defaults to ``SiteConfig()``.
        templates_dir : Path, optional
            Override for the template directory.
        """
        self.source = str(source)
        self.output_path = output_path
        self.config = config or SiteConfig()
        self.title = title or derive_title(self.source)
        self.renderer = HtmlContentRenderer()
        self.assembler = DocumentAssembler(self.config, templates_dir=templates_dir)

    def run(self) -> GenerationResult:
        """Render the source and write the page.

        Returns
        -------
        GenerationResult
            Output path and the number of bytes written.

        Raises
        ------
        OSError
            If the source file cannot be read or the output cannot be written.
        requests.HTTPError
            If a URL source answers with an error status.

        Notes
        -----
        The output file is written only after the whole page has been
        assembled, so a failure never leaves a partial file behind.
        """
        markdown_source = self._read_source()
        _document, html = render_document(
            markdown_source,
            self.title,
            self.config,
            renderer=self.renderer,
            assembler=self.assembler,
        )
        payload = html.encode("utf-8")
        self.output_path.write_bytes(payload)
        logger.debug("wrote %d bytes to %s", len(payload), self.output_path)
        return GenerationResult(path=self.output_path, size_bytes=len(payload))

    def _read_source(self) -> str:
        if _is_url(self.source):
            return self._fetch_markdown()
        return Path(self.source).read_text(encoding="utf-8")

    def _fetch_markdown(self) -> str:
        """Download markdown from the source URL."""
        session = requests.Session()
        retry = Retry(
            total=5,
            read=5,
            connect=3,
            backoff_factor=0.5,
            status_forcelist=(500, 502, 503, 504),
            allowed_methods=("GET", "HEAD"),
        )
        adapter = HTTPAdapter(max_retries=retry)
        session.mount("https://", adapter)
        session.mount("http://", adapter)
        try:
            logger.debug("fetching %s", self.source)
            resp = session.get(self.source, timeout=30)
            resp.raise_for_status()
            return resp.text
        finally:
            session.close()


def derive_title(source: str | Path) -> str:
    """Build a display title from a file name or URL.

    The ``.md`` extension is dropped, hyphens and underscores become spaces,
    and the first letter of every word is upper-cased.

    Examples
    --------
    >>> derive_title("docs/release-plan_v2.md")
    'Release Plan V2'
    >>> derive_title("https://example.com/kb/known-issues.md")
    'Known Issues'
    """
    text = str(source)
    if _is_url(text):
        name = PurePosixPath(urlsplit(text).path).name
    else:
        name = Path(text).name
    stem = name.removesuffix(".md")
    spaced = stem.replace("-", " ").replace("_", " ")
    return WORD_START_PATTERN.sub(lambda match: match.group(0).upper(), spaced)


def _is_url(source: str) -> bool:
    return source.lower().startswith(URL_PREFIXES)


__all__ = [
    "DocumentAssembler",
    "PageContentGenerator",
    "derive_title",
    "render_document",
]
