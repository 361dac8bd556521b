"""Utility helpers shared by the jless site configuration loader."""

from __future__ import annotations

import typing as typ

from .models import NavLinkConfig, SiteConfigError, default_nav_links


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _build_nav_links(raw: object | None) -> list[NavLinkConfig]:
    """Build header navigation links, falling back to the site defaults."""
    if raw is None:
        return default_nav_links()
    if not isinstance(raw, list):
        msg = "'nav_links' must be a list of {label, href} mappings."
        raise SiteConfigError(msg)
    links: list[NavLinkConfig] = []
    for index, entry in enumerate(raw):
        match entry:
            case {"label": label, "href": href}:
                label_text = _optional_str(label)
                href_text = _optional_str(href)
                if label_text is None or href_text is None:
                    msg = f"Navigation link #{index} needs a non-empty label and href."
                    raise SiteConfigError(msg)
                links.append(NavLinkConfig(label=label_text, href=href_text))
            case _:
                msg = f"Navigation link #{index} must define 'label' and 'href'."
                raise SiteConfigError(msg)
    return links


def _build_page_outputs(raw: typ.Mapping[str, typ.Any] | None) -> dict[str, str]:
    """Map page keys to output filenames, ignoring blank entries."""
    if not raw:
        return {}
    if not isinstance(raw, dict):
        msg = "'pages' must map page keys to output filenames."
        raise SiteConfigError(msg)
    outputs: dict[str, str] = {}
    for key, payload in raw.items():
        match payload:
            case str():
                filename = _optional_str(payload)
            case {"output": output}:
                filename = _optional_str(output)
            case _:
                filename = None
        if filename:
            outputs[str(key)] = filename
    return outputs


__all__ = [
    "_build_nav_links",
    "_build_page_outputs",
    "_optional_str",
]
