"""Showcase: Morton spatial indexing, RGB/HSV color math and word statistics."""

from __future__ import annotations

import logging

from ._color import (
    HEX_FALLBACK,
    adjust_brightness,
    adjust_saturation,
    hex_to_rgb,
    hsv_to_rgb,
    hsv_to_rgb_batch,
    hsv_to_rgb_normalized,
    rgb_to_hex,
    rgb_to_hsv,
    rgb_to_hsv_batch,
    rgb_to_hsv_normalized,
    rotate_hue,
)
from ._errors import InvalidArgumentError, ShowcaseError
from ._morton import (
    MORTON_BITS,
    morton_decode,
    morton_encode,
    query_sorted,
    range_query,
    to_binary_string,
    z_order_sort,
    z_order_traversal,
)
from ._phrases import count_phrases
from ._stop_words import STOP_WORDS
from ._types import (
    HSV,
    RGB,
    ChartEntry,
    MortonPoint,
    TextStats,
    WordCount,
    WordFrequency,
)
from ._words import (
    DEFAULT_TOP_N,
    chart_data,
    count_lines,
    count_words,
    merge_counts,
    normalize_text,
    process_text,
    top_words,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Errors
    "InvalidArgumentError",
    "ShowcaseError",
    # Types
    "ChartEntry",
    "HSV",
    "MortonPoint",
    "RGB",
    "TextStats",
    "WordCount",
    "WordFrequency",
    # Spatial index
    "MORTON_BITS",
    "morton_decode",
    "morton_encode",
    "query_sorted",
    "range_query",
    "to_binary_string",
    "z_order_sort",
    "z_order_traversal",
    # Color space
    "HEX_FALLBACK",
    "adjust_brightness",
    "adjust_saturation",
    "hex_to_rgb",
    "hsv_to_rgb",
    "hsv_to_rgb_batch",
    "hsv_to_rgb_normalized",
    "rgb_to_hex",
    "rgb_to_hsv",
    "rgb_to_hsv_batch",
    "rgb_to_hsv_normalized",
    "rotate_hue",
    # Word stats
    "DEFAULT_TOP_N",
    "STOP_WORDS",
    "chart_data",
    "count_lines",
    "count_phrases",
    "count_words",
    "merge_counts",
    "normalize_text",
    "process_text",
    "top_words",
]
