"""Multi-word phrase counting with an Aho-Corasick automaton."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import ahocorasick

from ._errors import InvalidArgumentError
from ._words import normalize_text

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)


def _build_automaton(keys: list[str]) -> ahocorasick.Automaton:
    ac = ahocorasick.Automaton()
    for idx, key in enumerate(keys):
        ac.add_word(key, idx)
    ac.make_automaton()
    return ac


def count_phrases(text: str, phrases: Iterable[str]) -> dict[str, int]:
    """Count occurrences of each phrase in `text`.

    Text and phrases go through normalize_text. Matches must start and end
    on token boundaries; overlapping matches are resolved leftmost-longest,
    non-overlapping. The result is keyed by normalized phrase, in input
    order, and includes phrases that never matched.
    """
    counts: dict[str, int] = {}
    for phrase in phrases:
        key = normalize_text(phrase)
        if not key:
            raise InvalidArgumentError(f"Phrase {phrase!r} is empty after normalization")
        counts.setdefault(key, 0)

    haystack = normalize_text(text)
    if not counts or not haystack:
        return counts

    keys = list(counts)
    ac = _build_automaton(keys)
    logger.debug("Scanning %d chars for %d phrases", len(haystack), len(keys))

    # (start, end, idx) for boundary-aligned matches only
    raw_matches: list[tuple[int, int, int]] = []
    for end_inclusive, idx in ac.iter(haystack):
        end = end_inclusive + 1
        start = end - len(keys[idx])
        if start > 0 and haystack[start - 1] != " ":
            continue
        if end < len(haystack) and haystack[end] != " ":
            continue
        raw_matches.append((start, end, idx))

    # Sort by start position, then by length descending (longest first)
    raw_matches.sort(key=lambda m: (m[0], -(m[1] - m[0])))

    last_end = -1
    for start, end, idx in raw_matches:
        if start >= last_end:
            counts[keys[idx]] += 1
            last_end = end

    return counts
