"""Pattern counting with a finite automaton built from a transition table."""

from __future__ import annotations

from itertools import islice
from os import PathLike
from typing import Union

ALPHABET_SIZE = 256
DEFAULT_PATTERN = "moscow"

# Characters at or above this code point are skipped by the automaton and
# leave its state unchanged, as signed 8-bit characters would be.
_SEARCHABLE_LIMIT = 128

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def next_state(pattern: str, state: int, char: str) -> int:
    """Return the automaton state reached from ``state`` on reading ``char``."""
    if state < len(pattern) and char == pattern[state]:
        return state + 1
    for candidate in range(state, 0, -1):
        if (
            pattern[candidate - 1] == char
            and pattern[: candidate - 1] == pattern[state - candidate + 1 : state]
        ):
            return candidate
    return 0


def build_transition_table(pattern: str) -> list[dict[str, int]]:
    """Build one transition map per non-final state over a 256-symbol alphabet."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    return [
        {chr(code): next_state(pattern, state, chr(code)) for code in range(ALPHABET_SIZE)}
        for state in range(len(pattern))
    ]


class PatternAutomaton:
    """Finite automaton that counts non-overlapping occurrences of a pattern."""

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        self.table = build_transition_table(pattern)

    def count(self, text: str) -> int:
        """Count matches in text, restarting after each match."""
        final = len(self.pattern)
        state = 0
        matches = 0
        for char in text:
            if ord(char) < _SEARCHABLE_LIMIT:
                state = self.table[state][char]
            if state == final:
                matches += 1
                state = 0
        return matches


def read_section(
    path: Union[str, PathLike], start_line: int, end_line: int
) -> str:
    """Return lines [start_line, end_line) of a file, each ending in a newline."""
    if start_line < 0 or end_line < 0:
        raise ValueError("line numbers must not be negative")
    with open(path, encoding="utf-8", errors="replace") as handle:
        lines = islice(handle, start_line, max(start_line, end_line))
        return "".join(line.rstrip("\n") + "\n" for line in lines)


def count_in_section(
    path: Union[str, PathLike],
    start_line: int,
    end_line: int,
    pattern: str = DEFAULT_PATTERN,
    case_sensitive: bool = False,
) -> int:
    """Count pattern occurrences in lines [start_line, end_line) of a file."""
    text = read_section(path, start_line, end_line)
    if not case_sensitive:
        text = text.translate(_ASCII_LOWER)
    return PatternAutomaton(pattern).count(text)