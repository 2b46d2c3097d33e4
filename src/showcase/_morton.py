"""Morton (Z-order) encoding, traversal and range queries."""

from __future__ import annotations

import logging
from bisect import bisect_left, bisect_right
from typing import TYPE_CHECKING

from ._errors import InvalidArgumentError, require_uint
from ._types import MortonPoint

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from typing import Any

logger = logging.getLogger(__name__)

MORTON_BITS: int = 16
_MAX_COORD: int = (1 << MORTON_BITS) - 1


def morton_encode(x: int, y: int) -> int:
    """Interleave the low 16 bits of x (even positions) and y (odd positions).

    Bits above the 16th are ignored; callers keep coordinates in [0, 65535].
    """
    require_uint("x", x)
    require_uint("y", y)
    z = 0
    for i in range(MORTON_BITS):
        z |= ((x & (1 << i)) << i) | ((y & (1 << i)) << (i + 1))
    return z


def morton_decode(code: int) -> tuple[int, int]:
    """Split a Morton code back into (x, y)."""
    require_uint("code", code)
    x = 0
    y = 0
    for i in range(MORTON_BITS):
        x |= (code & (1 << (2 * i))) >> i
        y |= (code & (1 << (2 * i + 1))) >> (i + 1)
    return x, y


def z_order_sort(points: Iterable[Any]) -> list[Any]:
    """Stable-sort points exposing .x/.y by their Morton code.

    The caller's objects are returned; duplicates keep their input order.
    """
    return sorted(points, key=lambda p: morton_encode(p.x, p.y))


def z_order_traversal(width: int, height: int) -> list[MortonPoint]:
    """Visit every cell of a width x height grid in Z-order."""
    require_uint("width", width)
    require_uint("height", height)
    points: list[MortonPoint] = []
    for y in range(height):
        for x in range(width):
            points.append(MortonPoint(x, y, morton_encode(x, y)))
    points.sort(key=lambda p: p.code)
    return points


def range_query(
    points: Iterable[Any], x1: float, y1: float, x2: float, y2: float
) -> list[Any]:
    """Brute-force filter of points inside [x1, x2] x [y1, y2], inclusive.

    Input order is preserved and need not be Morton-sorted.
    """
    return [p for p in points if x1 <= p.x <= x2 and y1 <= p.y <= y2]


def query_sorted(
    points: Sequence[Any], x1: int, y1: int, x2: int, y2: int
) -> list[Any]:
    """Range query over points already sorted by Morton code.

    Every point inside the box has a code between encode(x1, y1) and
    encode(x2, y2), so only that slice is scanned. Returns the same result
    as range_query on the same input, provided the points themselves lie
    in [0, 65535]. Bounds past 65535 are clamped.
    """
    for name, value in (("x1", x1), ("y1", y1), ("x2", x2), ("y2", y2)):
        require_uint(name, value)
    # Codes only cover 16-bit coordinates; points are assumed to fit too.
    x2 = min(x2, _MAX_COORD)
    y2 = min(y2, _MAX_COORD)
    if x1 > x2 or y1 > y2:
        return []

    codes = [morton_encode(p.x, p.y) for p in points]
    lo = bisect_left(codes, morton_encode(x1, y1))
    hi = bisect_right(codes, morton_encode(x2, y2))
    logger.debug("query_sorted scanning %d of %d points", hi - lo, len(codes))
    return range_query(points[lo:hi], x1, y1, x2, y2)


def to_binary_string(code: int, bits: int = MORTON_BITS) -> str:
    """Zero-padded, MSB-first binary string of exactly `bits` digits.

    Raises InvalidArgumentError if `code` does not fit in `bits` digits.
    """
    require_uint("code", code)
    require_uint("bits", bits)
    if bits < 1:
        raise InvalidArgumentError("bits must be at least 1")
    if code.bit_length() > bits:
        raise InvalidArgumentError(
            f"code {code} needs {code.bit_length()} bits, more than {bits}"
        )
    return format(code, f"0{bits}b")
