"""Whole-word pattern counting with the Boyer-Moore bad-character heuristic."""

from __future__ import annotations

from itertools import islice
from os import PathLike
from typing import Mapping, Union

DEFAULT_PATTERN = "moscow"

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def _is_ascii_alpha(char: str) -> bool:
    return char.isascii() and char.isalpha()


def _ascii_lower(text: str) -> str:
    return text.translate(_ASCII_LOWER)


def is_whole_word(text: str, start: int, length: int) -> bool:
    """Return True if text[start:start+length] is not flanked by letters."""
    before = start == 0 or not _is_ascii_alpha(text[start - 1])
    end = start + length
    after = end >= len(text) or not _is_ascii_alpha(text[end])
    return before and after


def bad_char_table(pattern: str) -> dict[str, int]:
    """Map each character of the pattern to the index of its last occurrence."""
    return {char: index for index, char in enumerate(pattern)}


def _last_index(table: Mapping[str, int], char: str) -> int:
    return table.get(char, -1)


def boyer_moore_count(text: str, pattern: str) -> int:
    """Count whole-word occurrences of pattern in text."""
    if not pattern:
        raise ValueError("pattern must not be empty")

    pattern_len = len(pattern)
    text_len = len(text)
    table = bad_char_table(pattern)
    count = 0
    shift = 0

    while shift <= text_len - pattern_len:
        comp = pattern_len - 1
        while comp >= 0 and pattern[comp] == text[shift + comp]:
            comp -= 1

        if comp < 0:
            if is_whole_word(text, shift, pattern_len):
                count += 1
            shift += pattern_len if shift + pattern_len < text_len else 1
        else:
            shift += max(1, comp - _last_index(table, text[shift + comp]))

    return count


def count_in_section(
    path: Union[str, PathLike],
    start_line: int,
    end_line: int,
    pattern: str = DEFAULT_PATTERN,
) -> int:
    """Count whole-word matches in lines [start_line, end_line) of a file.

    Each line is lower-cased (ASCII letters only) before searching.
    """
    if start_line < 0 or end_line < 0:
        raise ValueError("line numbers must not be negative")
    total = 0
    with open(path, encoding="utf-8", errors="replace") as handle:
        for line in islice(handle, start_line, max(start_line, end_line)):
            total += boyer_moore_count(_ascii_lower(line.rstrip("\n")), pattern)
    return total