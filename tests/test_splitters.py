"""Unit tests for word splitters and the splitter registry."""

from __future__ import annotations

import re

import pytest

from clozeterms.stages.splitters import (
    DEFAULT_SPLITTER,
    JAPANESE_WORD_SPLITTER,
    SPLITTER_REGISTRY,
    WHITESPACE_WORD_SPLITTER,
    FunctionWordSplitter,
    RegexWordSplitter,
    WordSplitter,
    all_splitters,
    as_word_splitter,
    resolve_splitter,
)


@pytest.mark.parametrize(
    ("word", "expected"),
    [
        ("碑文", ["碑", "文"]),
        ("られ", ["られ"]),
        ("マヘンドラパルバタ", ["マヘ", "ンド", "ラパ", "ルバ", "タ"]),
        ("漢字かなabc", ["漢", "字", "かな", "abc"]),
        ("abcdefgh", ["abcde", "fgh"]),
        ("ｱｲｳ", ["ｱｲ", "ｳ"]),
    ],
)
def test_japanese_splitter(word: str, expected: list[str]) -> None:
    assert JAPANESE_WORD_SPLITTER.split_word(word) == expected


def test_japanese_splitter_drops_whitespace() -> None:
    """ASCII and ideographic spaces separate pieces and never appear in them."""
    assert JAPANESE_WORD_SPLITTER.split_word("ab cd　ef") == ["ab", "cd", "ef"]
    assert JAPANESE_WORD_SPLITTER.split_word("   ") == []


def test_whitespace_splitter() -> None:
    assert WHITESPACE_WORD_SPLITTER.split_word("big  red\tdog") == ["big", "red", "dog"]


def test_regex_splitter_from_string() -> None:
    splitter = RegexWordSplitter.compile(r"\d+")
    assert splitter.split_word("a12b345") == ["12", "345"]


def test_builtin_splitters_satisfy_protocol() -> None:
    assert isinstance(JAPANESE_WORD_SPLITTER, WordSplitter)
    assert isinstance(FunctionWordSplitter(str.split), WordSplitter)


def test_as_word_splitter_adapts_callables_and_patterns() -> None:
    from_func = as_word_splitter(lambda w: tuple(w))
    from_pattern = as_word_splitter(re.compile(r"."))

    assert from_func.split_word("ab") == ["a", "b"]
    assert from_pattern.split_word("ab") == ["a", "b"]
    assert as_word_splitter(JAPANESE_WORD_SPLITTER) is JAPANESE_WORD_SPLITTER


def test_as_word_splitter_rejects_other_objects() -> None:
    with pytest.raises(TypeError):
        as_word_splitter(42)  # type: ignore[arg-type]


def test_resolve_registered_alias() -> None:
    result = resolve_splitter("whitespace")
    assert result.is_ok()
    assert result.unwrap() is WHITESPACE_WORD_SPLITTER


def test_resolve_pattern_fallback() -> None:
    result = resolve_splitter(r"[a-z]{2}")
    assert result.unwrap().split_word("abcde") == ["ab", "cd"]


def test_resolve_invalid_pattern_is_err() -> None:
    result = resolve_splitter("[unclosed")
    assert result.is_err()
    assert "[unclosed" in result.unwrap_err()
    assert resolve_splitter("").is_err()


def test_registry_snapshot_is_a_copy() -> None:
    snapshot = dict(all_splitters())
    snapshot["extra"] = WHITESPACE_WORD_SPLITTER
    assert "extra" not in SPLITTER_REGISTRY
    assert DEFAULT_SPLITTER in SPLITTER_REGISTRY


def test_japanese_splitter_keeps_no_break_space_in_runs() -> None:
    """Only ASCII whitespace and `　` separate runs of other characters."""
    assert JAPANESE_WORD_SPLITTER.split_word("ab\u00a0cd") == ["ab\u00a0cd"]
    assert JAPANESE_WORD_SPLITTER.split_word("a\u2002b\tc") == ["a\u2002b", "c"]
