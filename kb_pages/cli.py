"""Cyclopts CLI entrypoint for rendering a knowledge-base markdown file.

The ``kb-pages`` console script reads one markdown document (a local file or
an ``http(s)://`` URL), renders it into a single self-contained HTML page
with a sidebar table of contents, and reports where the page was written.

Examples
--------
Render a roadmap with a title derived from the file name:

>>> from kb_pages.cli import main
>>> main()  # doctest: +SKIP

Render with an explicit title and branding config:

>>> from kb_pages.cli import app
>>> app(
...     ["docs/roadmap.md", "public/roadmap.html", "Roadmap", "--config", "kb.yaml"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import STATUS_TEMPLATE
from .config import load_site_config
from .generator import PageContentGenerator

app = App(
    name="kb-pages",
    help="Render a markdown file into a self-contained HTML page.",
    config=cyclopts.config.Env("INPUT_", command=False),  # type: ignore[unknown-argument]
)


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.default
def generate(
    input_path: typ.Annotated[
        str, Parameter(help="Markdown file path or http(s) URL")
    ],
    output_path: typ.Annotated[Path, Parameter(help="Where to write the HTML page")],
    title: typ.Annotated[
        str | None,
        Parameter(help="Document title (derived from the input name if omitted)"),
    ] = None,
    *,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to a YAML config", env_var="INPUT_CONFIG")
    ] = None,
    verbose: typ.Annotated[bool, Parameter(help="Enable debug logging")] = False,
) -> None:
    """Render ``input_path`` into ``output_path``.

    Parameters
    ----------
    input_path : str
        Markdown source; a filesystem path or an ``http(s)://`` URL.
    output_path : Path
        Destination of the generated HTML page.
    title : str or None, optional
        Title shown in the page title and sidebar. When ``None`` it is derived
        from the input name (``release-plan.md`` becomes ``Release Plan``).
    config : Path or None, optional
        YAML file with ``theme`` and ``navigation`` settings (overridable via
        ``INPUT_CONFIG``). Built-in defaults apply when omitted.
    verbose : bool, optional
        Log pipeline diagnostics at DEBUG level to stderr.

    Returns
    -------
    None
        Writes the page and prints a status line with its size.

    Raises
    ------
    OSError
        If the input cannot be read or the output cannot be written.
    SiteConfigError
        If the configuration file holds invalid values.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    site_config = load_site_config(config)
    generator = PageContentGenerator(
        input_path, output_path, title=title, config=site_config
    )
    result = generator.run()
    print(STATUS_TEMPLATE.format(path=_format_path(result.path), kb=result.size_kb))


def main() -> None:
    """Invoke the Cyclopts application that powers the ``kb-pages`` command.

    Missing positional arguments are reported by Cyclopts on stderr together
    with the usage line, and the process exits with a non-zero status.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
