"""WCAG contrast ratio between a text element's foreground and background.

Reference: http://www.w3.org/TR/WCAG20/#contrast-ratiodef
           http://www.w3.org/TR/WCAG20/#relativeluminancedef

Pipeline: color string -> RGB triple -> normalized triple -> relative
luminance -> contrast ratio. Every step is a pure function.

Callers compare the returned ratio against the WCAG threshold themselves:
4.5:1 for normal text, 3:1 for large scale text (18pt, or 14pt bold).
Element-like objects must already carry literal hex colors; no computed-style
resolution happens here.

Public API:
- normalize_color(rgb) -> tuple[float, float, float]
- linearize_channel(c: float) -> float
- relative_luminance(normalized) -> float
- contrast_ratio(l1: float, l2: float) -> float
- color_contrast(foreground: str, background: str) -> float
- check_text_contrast(app, text, background=None) -> float
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Iterable, Sequence, Tuple

from config import settings

from .color_parsers import to_rgb
from .errors import MissingStylePropertyError

__all__ = [
    "normalize_color",
    "linearize_channel",
    "relative_luminance",
    "contrast_ratio",
    "color_contrast",
    "check_text_contrast",
]

_log = logging.getLogger(__name__)

_FOREGROUND_PROPS = ("color",)
_BACKGROUND_PROPS = ("background_color", "backgroundColor", "background-color")


def normalize_color(rgb: Sequence[int]) -> Tuple[float, float, float]:
    """Scale integer channels from [0, 255] to [0, 1] (no clamping)."""
    r, g, b = rgb
    return (
        r / settings.CHANNEL_MAX,
        g / settings.CHANNEL_MAX,
        b / settings.CHANNEL_MAX,
    )


def linearize_channel(c: float) -> float:
    if c <= settings.SRGB_LINEAR_THRESHOLD:
        return c / settings.SRGB_LINEAR_DIVISOR
    scaled = (c + settings.SRGB_GAMMA_OFFSET) / settings.SRGB_GAMMA_SCALE
    return scaled ** settings.SRGB_GAMMA_EXPONENT


def relative_luminance(normalized: Sequence[float]) -> float:
    r, g, b = (linearize_channel(c) for c in normalized)
    wr, wg, wb = settings.WCAG_CHANNEL_WEIGHTS
    return wr * r + wg * g + wb * b


def contrast_ratio(l1: float, l2: float) -> float:
    """Ratio of two relative luminances, in [1, 21]. Argument order is irrelevant."""
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + settings.LUMINANCE_OFFSET) / (darker + settings.LUMINANCE_OFFSET)


def _luminance_of(color: str) -> float:
    return relative_luminance(normalize_color(to_rgb(color)))


def color_contrast(foreground: str, background: str) -> float:
    return contrast_ratio(_luminance_of(foreground), _luminance_of(background))


def _read_style(element: Any, props: Iterable[str], role: str) -> str:
    style = getattr(element, "style", None)
    if style is not None:
        for prop in props:
            if isinstance(style, Mapping):
                value = style.get(prop)
            else:
                value = getattr(style, prop, None)
            if value:
                return value
    raise MissingStylePropertyError(
        f"{role} element has no style value for {'/'.join(props)}",
        context={"element": element, "props": tuple(props)},
    )


def check_text_contrast(app: Any, text: Any, background: Any | None = None) -> float:
    """Contrast between a text element's color and a background color.

    Parameters
    ----------
    app : Any
        Unused; accepted so test-helper suites can pass their app context.
    text : element-like
        Exposes ``style.color`` holding a hex color.
    background : element-like, optional
        Exposes ``style.background_color`` (or the DOM spelling
        ``style.backgroundColor``). Defaults to ``text`` itself, for elements
        that carry both their text color and background color.

    Returns
    -------
    float
        Contrast ratio in [1, 21].
    """
    if background is None:
        background = text
    fg = _read_style(text, _FOREGROUND_PROPS, "text")
    bg = _read_style(background, _BACKGROUND_PROPS, "background")
    ratio = color_contrast(fg, bg)
    _log.debug("Text contrast fg=%s bg=%s ratio=%.2f", fg, bg, ratio)
    return ratio
