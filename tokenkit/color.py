"""Color math: hex/RGB/HSL conversion and WCAG contrast."""

from __future__ import annotations

import math
import re
from typing import Optional

from .models import HSL, RGB, ContrastLevel, ContrastResult

WCAG_AA_THRESHOLD = 4.5
WCAG_AAA_THRESHOLD = 7.0

_HEX_PATTERN = re.compile(r"^#?(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
_RGB_PATTERN = re.compile(
    r"^rgba?\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})", re.IGNORECASE
)


class ColorError(ValueError):
    """Base class for color parsing failures."""


class InvalidColorFormat(ColorError):
    """Raised when a hex or rgb() literal is malformed."""


class UnparseableColor(ColorError):
    """Raised when a value is not in a recognised color format."""


def hex_to_rgb(value: str) -> RGB:
    """Parse a 3- or 6-digit hex color, with or without a leading ``#``."""
    text = value.strip()
    if not _HEX_PATTERN.match(text):
        raise InvalidColorFormat(f"Invalid hex color: {value!r}")
    digits = text.lstrip("#")
    if len(digits) == 3:
        digits = "".join(char * 2 for char in digits)
    return RGB(
        r=int(digits[0:2], 16),
        g=int(digits[2:4], 16),
        b=int(digits[4:6], 16),
    )


def parse_rgb_string(value: str) -> RGB:
    """Parse the first three channels of an ``rgb()``/``rgba()`` call."""
    match = _RGB_PATTERN.match(value.strip())
    if not match:
        raise InvalidColorFormat(f"Invalid rgb() color: {value!r}")
    channels = [int(group) for group in match.groups()]
    if any(channel > 255 for channel in channels):
        raise InvalidColorFormat(f"rgb() channel out of range: {value!r}")
    return RGB(*channels)


def parse_color(value: str) -> Optional[RGB]:
    """Parse hex or rgb()/rgba() text, returning None for anything else."""
    text = value.strip()
    try:
        if text.startswith("#"):
            return hex_to_rgb(text)
        if text.lower().startswith("rgb"):
            return parse_rgb_string(text)
    except InvalidColorFormat:
        return None
    return None


def rgb_to_hex(rgb: RGB) -> str:
    return f"#{rgb.r:02x}{rgb.g:02x}{rgb.b:02x}"


def rgb_to_hsl(rgb: RGB) -> HSL:
    r, g, b = rgb.r / 255, rgb.g / 255, rgb.b / 255
    high = max(r, g, b)
    low = min(r, g, b)
    lightness = (high + low) / 2
    hue = 0.0
    saturation = 0.0

    if high != low:
        delta = high - low
        if lightness > 0.5:
            saturation = delta / (2 - high - low)
        else:
            saturation = delta / (high + low)
        if high == r:
            hue = (g - b) / delta + (6 if g < b else 0)
        elif high == g:
            hue = (b - r) / delta + 2
        else:
            hue = (r - g) / delta + 4
        hue /= 6

    return HSL(
        hue=_round_half_up(hue * 360) % 360,
        saturation=_round_half_up(saturation * 100),
        lightness=_round_half_up(lightness * 100),
    )


def hsl_to_rgb(hsl: HSL) -> RGB:
    h = (hsl.hue % 360) / 360
    s = hsl.saturation / 100
    lightness = hsl.lightness / 100

    if s == 0:
        channel = _round_half_up(lightness * 255)
        return RGB(channel, channel, channel)

    q = lightness * (1 + s) if lightness < 0.5 else lightness + s - lightness * s
    p = 2 * lightness - q
    return RGB(
        r=_round_half_up(_hue_to_channel(p, q, h + 1 / 3) * 255),
        g=_round_half_up(_hue_to_channel(p, q, h) * 255),
        b=_round_half_up(_hue_to_channel(p, q, h - 1 / 3) * 255),
    )


def hex_to_hsl(value: str) -> HSL:
    """Convert a hex literal to an HSL triple (integer degree/percent)."""
    return rgb_to_hsl(hex_to_rgb(value))


def relative_luminance(rgb: RGB) -> float:
    """Relative luminance per WCAG 2.x (sRGB, BT.709 weights)."""

    def _linear(channel: int) -> float:
        srgb = channel / 255
        if srgb <= 0.03928:
            return srgb / 12.92
        return ((srgb + 0.055) / 1.055) ** 2.4

    return 0.2126 * _linear(rgb.r) + 0.7152 * _linear(rgb.g) + 0.0722 * _linear(rgb.b)


def contrast_ratio(color_a: str, color_b: str) -> float:
    """Return the WCAG contrast ratio between two hex or rgb() colors."""
    rgb_a = parse_color(color_a)
    rgb_b = parse_color(color_b)
    if rgb_a is None or rgb_b is None:
        bad = color_a if rgb_a is None else color_b
        raise UnparseableColor(f"Cannot parse color value: {bad!r}")

    lum_a = relative_luminance(rgb_a)
    lum_b = relative_luminance(rgb_b)
    lighter = max(lum_a, lum_b)
    darker = min(lum_a, lum_b)
    return (lighter + 0.05) / (darker + 0.05)


def classify_contrast(ratio: float) -> ContrastResult:
    passes_aa = ratio >= WCAG_AA_THRESHOLD
    passes_aaa = ratio >= WCAG_AAA_THRESHOLD
    if passes_aaa:
        level = ContrastLevel.AAA
    elif passes_aa:
        level = ContrastLevel.AA
    else:
        level = ContrastLevel.FAIL
    return ContrastResult(
        ratio=_round_half_up(ratio * 100) / 100,
        passes_aa=passes_aa,
        passes_aaa=passes_aaa,
        classification=level,
    )


def check_color_contrast(foreground: str, background: str) -> Optional[ContrastResult]:
    """Classify two color literals, or None when either cannot be parsed."""
    try:
        ratio = contrast_ratio(foreground, background)
    except UnparseableColor:
        return None
    return classify_contrast(ratio)


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


__all__ = [
    "ColorError",
    "InvalidColorFormat",
    "UnparseableColor",
    "WCAG_AA_THRESHOLD",
    "WCAG_AAA_THRESHOLD",
    "check_color_contrast",
    "classify_contrast",
    "contrast_ratio",
    "hex_to_hsl",
    "hex_to_rgb",
    "hsl_to_rgb",
    "parse_color",
    "parse_rgb_string",
    "relative_luminance",
    "rgb_to_hex",
    "rgb_to_hsl",
]
