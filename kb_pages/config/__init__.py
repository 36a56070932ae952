"""Load and validate the optional kb_pages YAML configuration.

The configuration only carries presentation choices: the brand shown in the
sidebar and page title, and the sidebar label truncation limits. Every key is
optional; :func:`load_site_config` fills in defaults.

Examples
--------
>>> from kb_pages.config import load_site_config
>>> config = load_site_config(None)
>>> config.navigation.group_label_limit
40
"""

from .loader import load_site_config
from .models import NavConfig, SiteConfig, SiteConfigError, ThemeConfig

__all__ = [
    "NavConfig",
    "SiteConfig",
    "SiteConfigError",
    "ThemeConfig",
    "load_site_config",
]
