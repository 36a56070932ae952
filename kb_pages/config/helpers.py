"""Utility helpers shared by the kb_pages configuration loader."""

from __future__ import annotations

import typing as typ

from .models import NavConfig, SiteConfigError, ThemeConfig


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _require_mapping(
    value: object | None, section: str
) -> typ.Mapping[str, typ.Any]:
    """Return ``value`` as a mapping, treating ``None`` as empty."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        msg = f"'{section}' configuration must be a mapping."
        raise SiteConfigError(msg)
    return value


def _positive_int(value: object, key: str) -> int:
    """Return ``value`` as a positive integer or raise ``SiteConfigError``."""
    if isinstance(value, int) and not isinstance(value, bool) and value > 0:
        return value
    msg = f"'navigation.{key}' must be a positive integer, got {value!r}."
    raise SiteConfigError(msg)


def _build_theme_config(payload: typ.Mapping[str, typ.Any]) -> ThemeConfig:
    """Build a ThemeConfig instance from the provided mapping payload."""
    base = ThemeConfig()
    site_name = _optional_str(payload.get("site_name"))
    doc_label = payload.get("doc_label", base.doc_label)
    return ThemeConfig(
        site_name=site_name or base.site_name,
        doc_label="" if doc_label is None else str(doc_label).strip(),
    )


def _build_nav_config(payload: typ.Mapping[str, typ.Any]) -> NavConfig:
    """Build a NavConfig instance, validating the truncation limits."""
    base = NavConfig()
    return NavConfig(
        group_label_limit=_positive_int(
            payload.get("group_label_limit", base.group_label_limit),
            "group_label_limit",
        ),
        link_label_limit=_positive_int(
            payload.get("link_label_limit", base.link_label_limit),
            "link_label_limit",
        ),
    )


__all__ = [
    "_build_nav_config",
    "_build_theme_config",
    "_optional_str",
    "_positive_int",
    "_require_mapping",
]
