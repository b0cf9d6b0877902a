"""Color notation parsers.

Converts a color string into an ``(r, g, b)`` triple of integers in [0, 255].
Parsers are registered per notation kind together with a predicate that
detects the notation, so new notations can be plugged in without touching the
contrast pipeline. Only ``hex`` is registered by default.

Public API:
- parse_hex(color: str) -> tuple[int, int, int]
- detect_notation(color: str) -> str
- to_rgb(color: str) -> tuple[int, int, int]
- register_color_parser(kind, parser, matches) / unregister_color_parser(kind)
- registered_notations() -> list[str]
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Dict, List, Tuple

from config import settings

from .errors import MalformedColorError, UnsupportedColorNotationError

__all__ = [
    "RGB",
    "ColorParserRegistry",
    "registry",
    "parse_hex",
    "detect_notation",
    "to_rgb",
    "register_color_parser",
    "unregister_color_parser",
    "registered_notations",
]

_log = logging.getLogger(__name__)

RGB = Tuple[int, int, int]

_HEX_RE = re.compile(r"#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})")
_HEX_ERR = "Color must be a #RGB or #RRGGBB hex string: {value!r}"


def parse_hex(color: str) -> RGB:
    if not isinstance(color, str) or not _HEX_RE.fullmatch(color):
        raise MalformedColorError(
            _HEX_ERR.format(value=color), context={"color": color, "notation": "hex"}
        )
    # One digit per channel for shorthand, two otherwise
    chunk = 1 if len(color) == settings.HEX_SHORTHAND_LENGTH else 2
    channels = []
    for i in range(3):
        start = 1 + i * chunk
        digits = color[start : start + chunk]
        # '#fff' must equal '#ffffff', so repeat the shorthand digit
        channels.append(int(digits * (2 // chunk), 16))
    r, g, b = channels
    return r, g, b


def _looks_like_hex(color: str) -> bool:
    return color.startswith("#")


class ColorParserRegistry:
    """Maps a notation kind to its detector and parser.

    Detection runs in registration order; the first matching notation wins.
    """

    def __init__(self) -> None:
        self._parsers: Dict[str, Tuple[Callable[[str], bool], Callable[[str], RGB]]] = {}

    def register(
        self, kind: str, parser: Callable[[str], RGB], matches: Callable[[str], bool]
    ) -> None:
        """Register ``parser`` for ``kind``. Overwrites an existing entry."""
        self._parsers[kind] = (matches, parser)

    def unregister(self, kind: str) -> None:
        """Remove a registered notation; noop if missing."""
        self._parsers.pop(kind, None)

    def notations(self) -> List[str]:
        return list(self._parsers)

    def detect(self, color: str) -> str:
        if not isinstance(color, str):
            raise MalformedColorError(
                f"Color must be a string, got {type(color).__name__}", context={"color": color}
            )
        for kind, (matches, _parser) in self._parsers.items():
            if matches(color):
                return kind
        raise UnsupportedColorNotationError(
            f"Unsupported color notation: {color!r}",
            context={"color": color, "known": self.notations()},
        )

    def parse(self, color: str) -> RGB:
        kind = self.detect(color)
        _matches, parser = self._parsers[kind]
        rgb = parser(color)
        _log.debug("Parsed %s color %r -> %s", kind, color, rgb)
        return rgb


# Convenience singleton used by the contrast pipeline
registry = ColorParserRegistry()
registry.register("hex", parse_hex, _looks_like_hex)


def detect_notation(color: str) -> str:
    return registry.detect(color)


def to_rgb(color: str) -> RGB:
    """Parse ``color`` with the parser registered for its notation."""
    return registry.parse(color)


def register_color_parser(
    kind: str, parser: Callable[[str], RGB], matches: Callable[[str], bool]
) -> None:
    registry.register(kind, parser, matches)


def unregister_color_parser(kind: str) -> None:
    registry.unregister(kind)


def registered_notations() -> List[str]:
    return registry.notations()
