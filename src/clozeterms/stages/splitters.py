# -----------------------------------------------------------------------------
# Word splitters: the pluggable "split a word into sub-pieces" capability.
#
# The resolver only ever calls `split_word(word)`. Anything satisfying the
# `WordSplitter` protocol works, and plain callables or compiled patterns are
# adapted through `as_word_splitter`.
#
# A tiny alias registry mirrors how the CLI and settings refer to splitters by
# name ("japanese", "whitespace"); unknown names are treated as a regular
# expression whose matches become the pieces.
#
# Splitters are expected to be stateless so they can be shared across threads.
# Returned pieces are not checked against the source word.
# -----------------------------------------------------------------------------
from __future__ import annotations

import re
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from clozeterms.core.result import Result, err, ok


@runtime_checkable
class WordSplitter(Protocol):
    """Capability: segment an arbitrary text fragment into pieces."""

    def split_word(self, word: str) -> list[str]: ...


@dataclass(frozen=True, slots=True)
class FunctionWordSplitter:
    """Adapter that lets a bare function act as a :class:`WordSplitter`."""

    func: Callable[[str], Sequence[str]]

    def split_word(self, word: str) -> list[str]:
        return list(self.func(word))


@dataclass(frozen=True, slots=True)
class RegexWordSplitter:
    """Split a word into the non-overlapping matches of `pattern`, left to right.

    Parts of the word that no alternative matches are dropped. Alternatives
    are tried in order at each position, so earlier rules take priority.
    """

    pattern: re.Pattern[str]

    @classmethod
    def compile(cls, pattern: str, flags: int = 0) -> RegexWordSplitter:
        """Build a splitter from a pattern string."""
        return cls(re.compile(pattern, flags))

    def split_word(self, word: str) -> list[str]:
        return [m.group(0) for m in self.pattern.finditer(word)]


# Han ideographs U+4E00-U+9FA5. Kana: hiragana U+3041-U+3096, the combining
# voiced sound mark U+3099, U+309D-U+30FE up to the end of katakana, and
# half-width katakana U+FF65-U+FF9D.
_HAN = "一-龥"
_KANA = "ぁ-ゖ゙ゝ-ヾ･-ﾝ"
_KANA_FULL_WIDTH = "ぁ-ヾ"
_IDEOGRAPHIC_SPACE = "　"
_ASCII_SPACE = r"\t\n\f\r "

_OTHER = f"[^{_ASCII_SPACE}{_HAN}{_KANA_FULL_WIDTH}{_IDEOGRAPHIC_SPACE}]"

#: One kanji, then 1-2 kana, then up to 5 of anything else that is not
#: ASCII whitespace, kanji, full-width kana or the ideographic space.
JAPANESE_WORD_SPLITTER = RegexWordSplitter.compile(rf"[{_HAN}]|[{_KANA}]{{1,2}}|{_OTHER}{{1,5}}")

#: Whitespace-separated words, for Latin-script text.
WHITESPACE_WORD_SPLITTER = RegexWordSplitter.compile(r"\S+")


def as_word_splitter(
    splitter: WordSplitter | Callable[[str], Sequence[str]] | re.Pattern[str],
) -> WordSplitter:
    """Coerce a splitter, a plain function, or a compiled pattern to a `WordSplitter`."""
    if isinstance(splitter, re.Pattern):
        return RegexWordSplitter(splitter)
    if isinstance(splitter, WordSplitter):
        return splitter
    if callable(splitter):
        return FunctionWordSplitter(splitter)
    raise TypeError(f"cannot use {type(splitter).__name__} as a word splitter")


# --------------------------------------------------------------------------- #
# Registry
# --------------------------------------------------------------------------- #

SPLITTER_REGISTRY: dict[str, WordSplitter] = {
    # Default: mixed kanji/kana text.
    "japanese": JAPANESE_WORD_SPLITTER,
    "whitespace": WHITESPACE_WORD_SPLITTER,
}

#: Alias used when neither the caller nor the settings choose a splitter.
DEFAULT_SPLITTER: str = "japanese"


def resolve_splitter(alias_or_pattern: str) -> Result[WordSplitter, str]:
    """Return the splitter registered under `alias_or_pattern`.

    Unknown names are compiled as a regular expression and wrapped in a
    :class:`RegexWordSplitter`; an invalid expression yields ``Err``.
    """
    if alias_or_pattern in SPLITTER_REGISTRY:
        return ok(SPLITTER_REGISTRY[alias_or_pattern])
    if not alias_or_pattern:
        return err("empty splitter name")
    try:
        return ok(RegexWordSplitter.compile(alias_or_pattern))
    except re.error as exc:
        return err(f"unknown splitter {alias_or_pattern!r} and not a valid pattern: {exc}")


def all_splitters() -> Mapping[str, WordSplitter]:
    """Return a shallow copy of the registry."""
    return dict(SPLITTER_REGISTRY)


__all__ = [
    "DEFAULT_SPLITTER",
    "JAPANESE_WORD_SPLITTER",
    "SPLITTER_REGISTRY",
    "WHITESPACE_WORD_SPLITTER",
    "FunctionWordSplitter",
    "RegexWordSplitter",
    "WordSplitter",
    "all_splitters",
    "as_word_splitter",
    "resolve_splitter",
]
