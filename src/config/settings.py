"""Global constants for the WCAG color contrast helpers."""

from __future__ import annotations

from typing import Final

# Rec. 709 coefficients used by WCAG (red, green, blue)
WCAG_CHANNEL_WEIGHTS: Final = (0.2126, 0.7152, 0.0722)
LUMINANCE_OFFSET: Final = 0.05

CHANNEL_MAX: Final = 255

# sRGB transfer function (WCAG 2.0 wording of the threshold)
SRGB_LINEAR_THRESHOLD: Final = 0.03928
SRGB_LINEAR_DIVISOR: Final = 12.92
SRGB_GAMMA_OFFSET: Final = 0.055
SRGB_GAMMA_SCALE: Final = 1.055
SRGB_GAMMA_EXPONENT: Final = 2.4

# Lengths include the leading '#'
HEX_SHORTHAND_LENGTH: Final = 4
HEX_FULL_LENGTH: Final = 7
