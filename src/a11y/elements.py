"""Element-like adapters for ``check_text_contrast``.

``StyledElement`` is a minimal stand-in for a DOM element exposing
``style.color`` and ``style.background_color``. Helpers build one from the
inline ``style`` attribute of an element the caller already selected with
BeautifulSoup. Only literal inline declarations are read; inherited or
stylesheet values are not resolved.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional

from bs4 import BeautifulSoup, Tag  # type: ignore

__all__ = [
    "ElementStyle",
    "StyledElement",
    "parse_inline_style",
    "styled_element_from_tag",
    "styled_element_from_markup",
]

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ElementStyle:
    color: Optional[str] = None
    background_color: Optional[str] = None

    @property
    def backgroundColor(self) -> Optional[str]:  # noqa: N802 - DOM spelling
        return self.background_color


@dataclass(frozen=True)
class StyledElement:
    style: ElementStyle
    tag_name: Optional[str] = None


def parse_inline_style(css: str) -> Dict[str, str]:
    """Split a ``style`` attribute into ``{property: value}``.

    Property names are lower-cased; later declarations win. Declarations
    without a colon are skipped.
    """
    out: Dict[str, str] = {}
    for decl in css.split(";"):
        if not decl.strip():
            continue
        name, sep, value = decl.partition(":")
        if not sep:
            _log.debug("Skipping malformed style declaration %r", decl)
            continue
        value = value.replace("!important", "").strip()
        out[name.strip().lower()] = value
    return out


def styled_element_from_tag(tag: Tag) -> StyledElement:
    declarations = parse_inline_style(tag.get("style") or "")
    return StyledElement(
        style=ElementStyle(
            color=declarations.get("color"),
            background_color=declarations.get("background-color"),
        ),
        tag_name=tag.name,
    )


def styled_element_from_markup(markup: str) -> StyledElement:
    """Build a ``StyledElement`` from the first element of an HTML fragment."""
    soup = BeautifulSoup(markup, "html.parser")
    tag = soup.find(True)
    if tag is None:
        raise ValueError(f"No element found in markup: {markup!r}")
    return styled_element_from_tag(tag)
