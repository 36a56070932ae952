"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ

from ruamel.yaml import YAML

from .helpers import _build_nav_config, _build_theme_config, _require_mapping
from .models import SiteConfig

if typ.TYPE_CHECKING:
    from pathlib import Path


def load_site_config(path: Path | None) -> SiteConfig:
    """Load the YAML configuration describing theme and navigation choices.

    Parameters
    ----------
    path : Path or None
        Filesystem path to the YAML configuration file. ``None`` returns the
        built-in defaults without touching the filesystem.

    Returns
    -------
    SiteConfig
        Parsed configuration with defaults applied to omitted keys.

    Raises
    ------
    FileNotFoundError
        If ``path`` is given but does not exist.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If a section is not a mapping or a navigation limit is not a
        positive integer.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> load_site_config(None).theme.brand
    'Jeepi Docs'
    """
    if path is None:
        return SiteConfig()
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    theme = _build_theme_config(_require_mapping(raw.get("theme"), "theme"))
    navigation = _build_nav_config(
        _require_mapping(raw.get("navigation"), "navigation")
    )
    return SiteConfig(theme=theme, navigation=navigation)


__all__ = ["load_site_config"]
