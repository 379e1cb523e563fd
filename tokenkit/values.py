"""Value shape classification shared by extraction and matching."""

from __future__ import annotations

import re
from enum import Enum
from typing import Optional


class ValueType(str, Enum):
    """Closed set of literal value shapes."""

    COLOR = "color"
    PIXELS = "pixels"
    REM = "rem"
    EM = "em"
    FONT_WEIGHT = "font-weight"
    NUMBER = "number"
    SHADOW = "shadow"
    STRING = "string"


NUMERIC_UNIT_TYPES = frozenset({ValueType.PIXELS, ValueType.REM, ValueType.EM})

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
_RGB_CALL = re.compile(r"^rgba?\(", re.IGNORECASE)
_DECIMAL = r"(?:\d+(?:\.\d+)?|\.\d+)"
_PIXELS = re.compile(rf"^{_DECIMAL}px$")
_REM = re.compile(rf"^{_DECIMAL}rem$")
_EM = re.compile(rf"^{_DECIMAL}em$")
_FONT_WEIGHT = re.compile(r"^[1-9]00$")
_NUMBER = re.compile(rf"^{_DECIMAL}$")
_SHADOW = re.compile(r"shadow", re.IGNORECASE)
_MAGNITUDE = re.compile(rf"^-?{_DECIMAL}")


def detect_value_type(value: str) -> ValueType:
    """Classify a literal by shape; checks are ordered, first hit wins."""
    text = value.strip()
    if _HEX_COLOR.match(text) or _RGB_CALL.match(text):
        return ValueType.COLOR
    if _PIXELS.match(text):
        return ValueType.PIXELS
    if _REM.match(text):
        return ValueType.REM
    if _EM.match(text):
        return ValueType.EM
    if _FONT_WEIGHT.match(text):
        return ValueType.FONT_WEIGHT
    if _NUMBER.match(text):
        return ValueType.NUMBER
    if _SHADOW.search(text):
        return ValueType.SHADOW
    return ValueType.STRING


def numeric_magnitude(value: str) -> Optional[float]:
    """Return the leading number of a literal such as ``16px`` or ``1.5``."""
    match = _MAGNITUDE.match(value.strip())
    if not match:
        return None
    return float(match.group(0))


__all__ = ["NUMERIC_UNIT_TYPES", "ValueType", "detect_value_type", "numeric_magnitude"]
