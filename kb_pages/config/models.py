"""Typed dataclasses describing kb_pages configuration structures."""

from __future__ import annotations

import dataclasses as dc

from kb_pages._constants import GROUP_LABEL_LIMIT, LINK_LABEL_LIMIT


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class ThemeConfig:
    """Branding applied to the generated page."""

    site_name: str = "Jeepi"
    doc_label: str = "Docs"

    @property
    def brand(self) -> str:
        """Return the sidebar brand header, e.g. ``"Jeepi Docs"``."""
        return f"{self.site_name} {self.doc_label}".strip()


@dc.dataclass(slots=True)
class NavConfig:
    """Label truncation limits for the sidebar navigation."""

    group_label_limit: int = GROUP_LABEL_LIMIT
    link_label_limit: int = LINK_LABEL_LIMIT


@dc.dataclass(slots=True)
class SiteConfig:
    """Theme and navigation settings for one rendering run."""

    theme: ThemeConfig = dc.field(default_factory=ThemeConfig)
    navigation: NavConfig = dc.field(default_factory=NavConfig)


__all__ = ["NavConfig", "SiteConfig", "SiteConfigError", "ThemeConfig"]
