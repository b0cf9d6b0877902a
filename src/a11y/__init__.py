"""Accessibility test helpers.

Currently provides the WCAG text contrast check used by accessibility
assertions.
"""

from .color_contrast import (  # noqa: F401
    check_text_contrast,
    color_contrast,
    contrast_ratio,
    linearize_channel,
    normalize_color,
    relative_luminance,
)
from .color_parsers import (  # noqa: F401
    detect_notation,
    parse_hex,
    register_color_parser,
    registered_notations,
    to_rgb,
    unregister_color_parser,
)
from .elements import (  # noqa: F401
    ElementStyle,
    StyledElement,
    parse_inline_style,
    styled_element_from_markup,
    styled_element_from_tag,
)
from .errors import (  # noqa: F401
    ColorError,
    MalformedColorError,
    MissingStylePropertyError,
    UnsupportedColorNotationError,
)
