"""RGB <-> HSV and RGB <-> hex conversion.

Two flavours of the same math:

* 8-bit API (`rgb_to_hsv`, `hsv_to_rgb`): RGB channels 0-255, hue in
  degrees, saturation/value in percent, every output rounded half-up.
* Normalized API (`*_normalized`, `*_batch`): RGB/S/V as floats in [0, 1],
  hue in degrees, nothing rounded.

The hue branch for RGB -> HSV is chosen red first, then green, then blue.
When two channels tie for the maximum the earlier branch wins; reference
outputs depend on that order.
"""

from __future__ import annotations

import logging
import math
import re
from typing import TYPE_CHECKING

from ._errors import InvalidArgumentError, require_number
from ._types import HSV, RGB

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)

HEX_FALLBACK = RGB(0, 0, 0)

_HEX_RE = re.compile(r"#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})", re.IGNORECASE)


def _round_half_up(x: float) -> int:
    # Python's round() is banker's rounding; reference outputs round .5 up.
    return math.floor(x + 0.5)


def _hsv_parts(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Hue in degrees, saturation and value as fractions."""
    mx = max(r, g, b)
    mn = min(r, g, b)
    delta = mx - mn

    s = 0.0 if mx == 0 else delta / mx

    h = 0.0
    if delta != 0:
        if mx == r:
            h = ((g - b) / delta + (6 if g < b else 0)) * 60
        elif mx == g:
            h = ((b - r) / delta + 2) * 60
        else:
            h = ((r - g) / delta + 4) * 60
    return h, s, mx


def _rgb_parts(h: float, s: float, v: float) -> tuple[float, float, float]:
    """RGB fractions from hue in degrees and s, v as fractions."""
    c = v * s
    x = c * (1 - abs(math.fmod(h / 60, 2) - 1))
    m = v - c

    if 0 <= h < 60:
        r, g, b = c, x, 0.0
    elif 60 <= h < 120:
        r, g, b = x, c, 0.0
    elif 120 <= h < 180:
        r, g, b = 0.0, c, x
    elif 180 <= h < 240:
        r, g, b = 0.0, x, c
    elif 240 <= h < 300:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x
    return r + m, g + m, b + m


def _check_numbers(**values: object) -> None:
    for name, value in values.items():
        require_number(name, value)


# -- 8-bit API --

def rgb_to_hsv(r: float, g: float, b: float) -> HSV:
    """Convert 0-255 channels to (hue degrees, saturation %, value %).

    Pure black has saturation 0; any gray has hue 0. Hue rounds half-up,
    so a red just short of 360 degrees (e.g. 255, 0, 1) reports h == 360.
    hsv_to_rgb maps 360 to the same color as 0.
    """
    _check_numbers(r=r, g=g, b=b)
    h, s, v = _hsv_parts(r / 255, g / 255, b / 255)
    return HSV(_round_half_up(h), _round_half_up(s * 100), _round_half_up(v * 100))


def hsv_to_rgb(h: float, s: float, v: float) -> RGB:
    """Convert (hue degrees, saturation %, value %) to 0-255 channels.

    Hue must be in [0, 360); wrapping 360 to 0 is left to the caller.
    """
    _check_numbers(h=h, s=s, v=v)
    r, g, b = _rgb_parts(h, s / 100, v / 100)
    return RGB(_round_half_up(r * 255), _round_half_up(g * 255), _round_half_up(b * 255))


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Format 0-255 integer channels as lowercase `#rrggbb`."""
    for name, value in (("r", r), ("g", g), ("b", b)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidArgumentError(
                f"{name} must be an int, got {type(value).__name__}"
            )
        if not 0 <= value <= 255:
            raise InvalidArgumentError(f"{name} must be in [0, 255], got {value}")
    return f"#{r:02x}{g:02x}{b:02x}"


def hex_to_rgb(text: str) -> RGB:
    """Parse `#rrggbb` (leading # optional, any case).

    Malformed input yields black instead of raising.
    """
    m = _HEX_RE.fullmatch(text) if isinstance(text, str) else None
    if m is None:
        logger.debug("Malformed hex color %r, using fallback", text)
        return HEX_FALLBACK
    return RGB(int(m.group(1), 16), int(m.group(2), 16), int(m.group(3), 16))


# -- Normalized API --

def rgb_to_hsv_normalized(r: float, g: float, b: float) -> HSV:
    """RGB fractions to HSV with hue in degrees and s, v as fractions.

    Hue lies in [0, 360], reaching 360.0 only through float error when
    blue barely exceeds green in the red branch.
    """
    _check_numbers(r=r, g=g, b=b)
    return HSV(*_hsv_parts(r, g, b))


def hsv_to_rgb_normalized(h: float, s: float, v: float) -> RGB:
    """HSV (hue degrees, s and v fractions) to RGB fractions."""
    _check_numbers(h=h, s=s, v=v)
    return RGB(*_rgb_parts(h, s, v))


def _validate_columns(
    columns: dict[str, Sequence[float]], limits: dict[str, float]
) -> int:
    lengths = {len(col) for col in columns.values()}
    names = "".join(columns)
    if len(lengths) != 1:
        raise InvalidArgumentError(f"{names} arrays must have the same length")
    n = lengths.pop()
    if n == 0:
        raise InvalidArgumentError(f"{names} arrays cannot be empty")
    for channel, col in columns.items():
        upper = limits[channel]
        for idx, val in enumerate(col):
            if (
                isinstance(val, bool)
                or not isinstance(val, (int, float))
                or (isinstance(val, float) and not math.isfinite(val))
                or not 0 <= val <= upper
            ):
                raise InvalidArgumentError(
                    f"Invalid {channel} value at index {idx}: {val!r}. "
                    f"Must be in range [0.0, {float(upper)}]"
                )
    return n


def rgb_to_hsv_batch(
    r: Sequence[float], g: Sequence[float], b: Sequence[float]
) -> list[HSV]:
    """Convert columnar RGB fractions; every value must lie in [0, 1]."""
    _validate_columns({"R": r, "G": g, "B": b}, {"R": 1, "G": 1, "B": 1})
    return [HSV(*_hsv_parts(ri, gi, bi)) for ri, gi, bi in zip(r, g, b)]


def hsv_to_rgb_batch(
    h: Sequence[float], s: Sequence[float], v: Sequence[float]
) -> list[RGB]:
    """Convert columnar HSV; hue in [0, 360], s and v in [0, 1]."""
    _validate_columns({"H": h, "S": s, "V": v}, {"H": 360, "S": 1, "V": 1})
    return [RGB(*_rgb_parts(hi, si, vi)) for hi, si, vi in zip(h, s, v)]


# -- Adjustments on 8-bit colors --

def _adjust(rgb: RGB, *, hue_shift: float = 0, s_factor: float = 1,
            v_factor: float = 1) -> RGB:
    h, s, v = _hsv_parts(rgb.r / 255, rgb.g / 255, rgb.b / 255)
    h = (h + hue_shift) % 360
    s = min(max(s * s_factor, 0.0), 1.0)
    v = min(max(v * v_factor, 0.0), 1.0)
    r, g, b = _rgb_parts(h, s, v)
    return RGB(_round_half_up(r * 255), _round_half_up(g * 255), _round_half_up(b * 255))


def adjust_saturation(rgb: RGB, factor: float) -> RGB:
    """Scale saturation by `factor`, clamped to [0, 1]."""
    _check_numbers(r=rgb.r, g=rgb.g, b=rgb.b, factor=factor)
    return _adjust(rgb, s_factor=factor)


def adjust_brightness(rgb: RGB, factor: float) -> RGB:
    """Scale value (brightness) by `factor`, clamped to [0, 1]."""
    _check_numbers(r=rgb.r, g=rgb.g, b=rgb.b, factor=factor)
    return _adjust(rgb, v_factor=factor)


def rotate_hue(rgb: RGB, degrees: float) -> RGB:
    """Rotate hue by `degrees`; negative rotations wrap into [0, 360)."""
    _check_numbers(r=rgb.r, g=rgb.g, b=rgb.b, degrees=degrees)
    return _adjust(rgb, hue_shift=degrees)
