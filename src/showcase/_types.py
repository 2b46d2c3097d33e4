"""Data structures for showcase."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True, frozen=True)
class MortonPoint:
    x: int
    y: int
    code: int   # x bits at even positions, y bits at odd


@dataclass(slots=True, frozen=True)
class RGB:
    r: float    # int 0-255, or float 0-1 on the normalized API
    g: float
    b: float


@dataclass(slots=True, frozen=True)
class HSV:
    h: float    # degrees, [0, 360]; 360 only at the red wrap-around
    s: float    # int percent 0-100, or float 0-1 on the normalized API
    v: float


@dataclass(slots=True, frozen=True)
class WordFrequency:
    word: str
    count: int


@dataclass(slots=True, frozen=True)
class WordCount:
    total_words: int
    unique_words: int
    frequencies: dict[str, int] = field(default_factory=dict)  # first-seen order


@dataclass(slots=True, frozen=True)
class TextStats:
    line_count: int
    total_words: int
    unique_words: int
    top_words: list[WordFrequency] = field(default_factory=list)


@dataclass(slots=True, frozen=True)
class ChartEntry:
    word: str
    count: int
    percentage: float
