import pytest

from patternbench.boyer_moore import (
    bad_char_table,
    boyer_moore_count,
    count_in_section,
    is_whole_word,
)


def test_is_whole_word_at_text_edges():
    assert is_whole_word("moscow", 0, 6) is True


def test_is_whole_word_with_punctuation():
    text = "(moscow)."
    assert is_whole_word(text, 1, 6) is True


def test_is_whole_word_rejects_letter_neighbours():
    assert is_whole_word("amoscow", 1, 6) is False
    assert is_whole_word("moscows", 0, 6) is False


def test_bad_char_table_keeps_last_index():
    table = bad_char_table("moscow")
    assert table == {"m": 0, "o": 4, "s": 2, "c": 3, "w": 5}


def test_bad_char_table_covers_every_pattern_char():
    pattern = "abracadabra"
    table = bad_char_table(pattern)
    assert set(table) == set(pattern)
    for char, index in table.items():
        assert pattern[index] == char
        assert char not in pattern[index + 1:]


@pytest.mark.parametrize("n", [0, 1, 3, 10])
def test_count_of_separated_words(n):
    text = " ".join(["moscow"] * n)
    assert boyer_moore_count(text, "moscow") == n


@pytest.mark.parametrize("sep", [", ", "! ", "-", ";", "\t", "1"])
def test_count_with_non_letter_separators(sep):
    text = sep.join(["moscow"] * 4)
    assert boyer_moore_count(text, "moscow") == 4


def test_embedded_words_not_counted():
    assert boyer_moore_count("muscovites moscows amoscow", "moscow") == 0


def test_adjacent_repeats_are_not_whole_words():
    assert boyer_moore_count("aaaa", "aa") == 0
    assert boyer_moore_count("aa aa", "aa") == 2


def test_pattern_longer_than_text():
    assert boyer_moore_count("war", "moscow") == 0


def test_search_is_case_sensitive():
    assert boyer_moore_count("MOSCOW Moscow", "moscow") == 0


def test_empty_pattern_rejected():
    with pytest.raises(ValueError):
        boyer_moore_count("some text", "")


@pytest.fixture
def book(tmp_path):
    lines = [
        "Moscow was burning.",
        "Nothing here.",
        "MOSCOW, moscow; moscow!",
        "The muscovites left Moscow.",
        "",
        "moscowmoscow",
    ]
    path = tmp_path / "book.txt"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path, lines


def test_section_counts_lowercase_lines(book):
    path, lines = book
    assert count_in_section(path, 0, 1, "moscow") == 1
    assert count_in_section(path, 2, 3, "moscow") == 3


def test_sections_sum_to_whole_file(book):
    path, lines = book
    whole = count_in_section(path, 0, len(lines), "moscow")
    parts = sum(
        count_in_section(path, start, start + 2, "moscow")
        for start in range(0, len(lines), 2)
    )
    assert parts == whole
    assert whole == 5


def test_end_past_file_is_clamped(book):
    path, lines = book
    assert count_in_section(path, 0, 1000, "moscow") == count_in_section(
        path, 0, len(lines), "moscow"
    )


def test_empty_range_counts_nothing(book):
    path, _ = book
    assert count_in_section(path, 3, 3, "moscow") == 0
    assert count_in_section(path, 4, 2, "moscow") == 0


def test_default_pattern(book):
    path, lines = book
    assert count_in_section(path, 0, len(lines)) == count_in_section(
        path, 0, len(lines), "moscow"
    )


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        count_in_section(tmp_path / "absent.txt", 0, 10, "moscow")


def test_negative_lines_rejected(book):
    path, _ = book
    with pytest.raises(ValueError):
        count_in_section(path, -1, 3, "moscow")