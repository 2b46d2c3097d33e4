"""Text normalization, word frequency tables and top-N ranking."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

import Stemmer

from ._errors import InvalidArgumentError, require_uint
from ._stop_words import STOP_WORDS
from ._types import ChartEntry, TextStats, WordCount, WordFrequency

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping, Sequence

logger = logging.getLogger(__name__)

DEFAULT_TOP_N: int = 10

# Keep ASCII word chars, whitespace and Latin-1 Supplement / Extended-A.
_STRIP_RE = re.compile(r"[^a-z0-9_\s\u00c0-\u017f]")
_SPACE_RE = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """Lowercase, blank out punctuation, collapse whitespace, trim."""
    if not isinstance(text, str):
        raise InvalidArgumentError(
            f"text must be a str, got {type(text).__name__}"
        )
    text = _STRIP_RE.sub(" ", text.lower())
    return _SPACE_RE.sub(" ", text).strip()


def _split(normalized: str) -> list[str]:
    return [tok for tok in normalized.split(" ") if tok]


def _token_filter(
    drop_stop_words: bool, stem: bool, language: str
) -> Callable[[list[str]], list[str]] | None:
    """Build the optional stop-word/stemming stage, or None for a no-op.

    `language` is checked even when both options are off.
    """
    if not isinstance(language, str) or (
        language not in STOP_WORDS and language not in Stemmer.algorithms()
    ):
        raise InvalidArgumentError(f"Unknown language {language!r}")
    if not (drop_stop_words or stem):
        return None

    stop_words: frozenset[str] = frozenset()
    if drop_stop_words:
        try:
            stop_words = STOP_WORDS[language]
        except KeyError:
            raise InvalidArgumentError(
                f"No stop words for language {language!r}; "
                f"expected one of {sorted(STOP_WORDS)}"
            ) from None

    stemmer = None
    if stem:
        try:
            stemmer = Stemmer.Stemmer(language)
        except KeyError:
            raise InvalidArgumentError(
                f"No Snowball stemmer for language {language!r}"
            ) from None

    def apply(tokens: list[str]) -> list[str]:
        if stop_words:
            tokens = [t for t in tokens if t not in stop_words]
        if stemmer is not None:
            tokens = stemmer.stemWords(tokens)
        return tokens

    return apply


def _tally(tokens: Iterable[str], table: dict[str, int]) -> int:
    n = 0
    for tok in tokens:
        table[tok] = table.get(tok, 0) + 1
        n += 1
    return n


def count_words(
    text: str,
    *,
    drop_stop_words: bool = False,
    stem: bool = False,
    language: str = "english",
) -> WordCount:
    """Count normalized tokens in `text`.

    Args:
        text: Raw input text.
        drop_stop_words: Remove tokens listed in STOP_WORDS[language].
        stem: Reduce tokens to their Snowball stem.
        language: Language for stop words and stemming.
    """
    tokens = _split(normalize_text(text))
    stage = _token_filter(drop_stop_words, stem, language)
    if stage is not None:
        tokens = stage(tokens)
    table: dict[str, int] = {}
    total = _tally(tokens, table)
    return WordCount(total_words=total, unique_words=len(table), frequencies=table)


def count_lines(
    lines: Iterable[str],
    *,
    drop_stop_words: bool = False,
    stem: bool = False,
    language: str = "english",
) -> WordCount:
    """Streaming count_words over an iterable of lines (e.g. an open file).

    Each item is tokenized on its own, so only one line is held at a time.
    """
    stage = _token_filter(drop_stop_words, stem, language)
    table: dict[str, int] = {}
    total = 0
    n_lines = 0
    for line in lines:
        tokens = _split(normalize_text(line))
        if stage is not None:
            tokens = stage(tokens)
        total += _tally(tokens, table)
        n_lines += 1
    logger.debug("Counted %d words over %d lines", total, n_lines)
    return WordCount(total_words=total, unique_words=len(table), frequencies=table)


def merge_counts(*counts: WordCount) -> WordCount:
    """Sum several WordCounts; first-seen order follows argument order."""
    table: dict[str, int] = {}
    total = 0
    for wc in counts:
        for word, n in wc.frequencies.items():
            table[word] = table.get(word, 0) + n
        total += wc.total_words
    return WordCount(total_words=total, unique_words=len(table), frequencies=table)


def top_words(
    table: Mapping[str, int] | WordCount, n: int = DEFAULT_TOP_N
) -> list[WordFrequency]:
    """Return the `n` most frequent words, ties kept in first-seen order."""
    require_uint("n", n)
    if isinstance(table, WordCount):
        table = table.frequencies
    for word, count in table.items():
        require_uint(f"count for {word!r}", count)
    # sort() is stable under reverse=True, so ties keep insertion order
    ranked = sorted(table.items(), key=lambda item: item[1], reverse=True)
    return [WordFrequency(word, count) for word, count in ranked[:n]]


def process_text(text: str, *, top_n: int = DEFAULT_TOP_N) -> TextStats:
    """Line count, totals and the top words for `text`.

    Lines are newline-delimited segments of the raw text, so a trailing
    newline adds an empty final line and "" counts as one line.
    """
    wc = count_words(text)
    return TextStats(
        line_count=len(text.split("\n")),
        total_words=wc.total_words,
        unique_words=wc.unique_words,
        top_words=top_words(wc.frequencies, top_n),
    )


def chart_data(top: Sequence[WordFrequency]) -> list[ChartEntry]:
    """Scale each count to a percentage of the largest count."""
    if not top:
        return []
    for entry in top:
        require_uint(f"count for {entry.word!r}", entry.count)
    max_count = max(entry.count for entry in top)
    return [
        ChartEntry(
            word=entry.word,
            count=entry.count,
            percentage=(entry.count / max_count) * 100 if max_count else 0.0,
        )
        for entry in top
    ]
