# patternbench

`patternbench` counts how often a pattern occurs in a large text file and
times how long that takes. It splits the file into sections of lines. Each
section goes to its own worker thread, and the counts are added up at the
end. You can choose one of two search algorithms:

- **Boyer-Moore** (`boyer-moore`) uses the bad-character rule. Each line is
  lowercased and searched on its own. Only the ASCII letters A-Z are
  lowercased. A match counts only when it stands as a whole word: there must
  be no ASCII letter directly before or after it. Punctuation next to the
  word is fine.
- **Finite automaton** (`automaton`) runs the section's text through a
  transition table built from the pattern. Every substring match counts.
  After each match the automaton starts again from its first state, so
  matches never overlap. Characters with a code point of 128 or above are
  skipped and leave the state unchanged. When run from the benchmark, the
  text is lowercased (ASCII A-Z only) before the search.

The two algorithms count different things, so their totals on the same file
can differ.

The pattern itself is never lowercased. Give it in lower case when the text
is lowercased, or it will not match. Files are read as UTF-8, and any bytes
that cannot be decoded are replaced.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
patternbench [path] [--pattern P] [--algorithm {boyer-moore,automaton}]
             [--workers N] [--lines N] [--repeats N] [--label TEXT]
```

| Option | Default | Meaning |
| --- | --- | --- |
| `path` | `file/war_and_peace.txt` | The text file to search. |
| `--pattern` | `moscow` | The pattern to count. |
| `--algorithm` | `boyer-moore` | The search algorithm to use. |
| `--workers` | `8` | The number of sections, with one thread per section. |
| `--lines` | `26579` | The number of lines to split into sections. |
| `--repeats` | `20` | How many timed runs to make. |
| `--label` | `Lenovo Slim 3` | The machine name used in the timing lines. |

For each run the command prints:

- a `TEST n` header,
- one `Thread ID: ... finished in ... ms` line per worker,
- a `FINAL COUNT` line,
- a `Total time taken <label>` line.

At the end it prints the average time over all runs, in whole milliseconds.

The command exits with status 1 if the file cannot be opened. It exits with
status 2 on an invalid value, such as an empty pattern or fewer than one
worker or repeat. If the file has fewer lines than `--lines`, the sections
past its end are simply empty.

## Library use

### Searching a string

```python
from patternbench.boyer_moore import boyer_moore_count
from patternbench.automaton import PatternAutomaton

boyer_moore_count("they marched on moscow. moscow burned.", "moscow")   # 2
boyer_moore_count("muscovites and moscowards", "moscow")                 # 0

automaton = PatternAutomaton("moscow")
automaton.count("moscow, moscowards")                                    # 2
```

In `patternbench.boyer_moore`:

- `is_whole_word(text, start, length)` checks that the slice which starts at
  `start` and runs for `length` characters has no ASCII letter on either
  side.
- `bad_char_table(pattern)` maps each character of the pattern to the index
  of its last occurrence.

In `patternbench.automaton`:

- `next_state(pattern, state, char)` gives a single transition.
- `build_transition_table(pattern)` returns one mapping per non-final state.
  Each mapping covers the 256 characters `chr(0)` to `chr(255)`.

An empty pattern raises `ValueError`.

### Searching a section of a file

Sections run from `start_line` (inclusive) to `end_line` (exclusive), with
lines counted from zero. Negative line numbers raise `ValueError`.

- `patternbench.boyer_moore.count_in_section(path, start_line, end_line, pattern)`
  counts whole-word matches in the section.
- `patternbench.automaton.read_section(path, start_line, end_line)` returns
  the text of the section, with each line ending in a newline.
- `patternbench.automaton.count_in_section(path, start_line, end_line, pattern, case_sensitive)`
  searches the section with the automaton. The text is lowercased unless
  `case_sensitive` is true.

### Running the benchmark from code

`patternbench.bench` provides:

- `section_bounds(total_lines, parts)` splits a line count into `parts`
  consecutive `(start, end)` ranges. Each range has `total_lines // parts`
  lines, except the last one, which runs to `total_lines`.
- `run_partitioned(path, pattern, algorithm, workers, total_lines)` searches
  all sections in parallel and returns a `RunResult`. `algorithm` is an
  `Algorithm` member or its string value.
- `run_tests(path, pattern, algorithm, workers, total_lines, repeats, label)`
  repeats that run, prints each timing and the average, and returns the list
  of `RunResult`s.
- `main(argv)` is the command-line entry point. It returns the exit status.

A `RunResult` holds:

- `count`, the total number of matches,
- `elapsed_ms`, the run's time in whole milliseconds,
- `section_counts`, the count for each section in order.