"""Timed, multi-threaded pattern counting over sections of a text file."""

from __future__ import annotations

import argparse
import sys
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from enum import Enum
from os import PathLike
from typing import Optional, Sequence, Union

from patternbench import automaton, boyer_moore

DEFAULT_FILENAME = "file/war_and_peace.txt"
DEFAULT_PATTERN = "moscow"
TOTAL_LINES = 26579
DEFAULT_WORKERS = 8
TEST_AMOUNT = 20
DEFAULT_LABEL = "Lenovo Slim 3"

_print_lock = threading.Lock()


class Algorithm(Enum):
    """Search algorithm used to count the pattern."""

    BOYER_MOORE = "boyer-moore"
    AUTOMATON = "automaton"


@dataclass(frozen=True)
class RunResult:
    """Outcome of one partitioned run."""

    count: int
    elapsed_ms: int
    section_counts: tuple[int, ...]


def section_bounds(total_lines: int, parts: int) -> list[tuple[int, int]]:
    """Split [0, total_lines) into ``parts`` ranges; the last takes the remainder."""
    if parts < 1:
        raise ValueError("parts must be at least 1")
    if total_lines < 0:
        raise ValueError("total_lines must not be negative")
    base = total_lines // parts
    starts = [base * index for index in range(parts)]
    ends = starts[1:] + [total_lines]
    return list(zip(starts, ends))


def _elapsed_ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)


def _count_section(
    path: Union[str, PathLike],
    bounds: tuple[int, int],
    pattern: str,
    algorithm: Algorithm,
) -> int:
    started = time.perf_counter()
    start_line, end_line = bounds
    if algorithm is Algorithm.BOYER_MOORE:
        found = boyer_moore.count_in_section(path, start_line, end_line, pattern)
    else:
        found = automaton.count_in_section(path, start_line, end_line, pattern, False)
    took = _elapsed_ms(started)
    with _print_lock:
        print(f"Thread ID: {threading.get_ident()} finished in {took} ms")
    return found


def run_partitioned(
    path: Union[str, PathLike],
    pattern: str = DEFAULT_PATTERN,
    algorithm: Union[Algorithm, str] = Algorithm.BOYER_MOORE,
    workers: int = DEFAULT_WORKERS,
    total_lines: int = TOTAL_LINES,
) -> RunResult:
    """Count the pattern over the file split across ``workers`` threads."""
    algorithm = Algorithm(algorithm)
    bounds = section_bounds(total_lines, workers)
    started = time.perf_counter()
    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = [
            pool.submit(_count_section, path, section, pattern, algorithm)
            for section in bounds
        ]
        counts = tuple(future.result() for future in futures)
    total = sum(counts)
    print(f"\tFINAL COUNT: {total}")
    return RunResult(count=total, elapsed_ms=_elapsed_ms(started), section_counts=counts)


def run_tests(
    path: Union[str, PathLike] = DEFAULT_FILENAME,
    pattern: str = DEFAULT_PATTERN,
    algorithm: Union[Algorithm, str] = Algorithm.BOYER_MOORE,
    workers: int = DEFAULT_WORKERS,
    total_lines: int = TOTAL_LINES,
    repeats: int = TEST_AMOUNT,
    label: str = DEFAULT_LABEL,
) -> list[RunResult]:
    """Repeat a partitioned run, report each time and the average."""
    if repeats < 1:
        raise ValueError("repeats must be at least 1")
    results = []
    for number in range(1, repeats + 1):
        print(f"\nTEST {number}")
        started = time.perf_counter()
        result = run_partitioned(path, pattern, algorithm, workers, total_lines)
        took = _elapsed_ms(started)
        print(f"\tTotal time taken {label}: {took} ms")
        results.append(RunResult(result.count, took, result.section_counts))
    average = sum(result.elapsed_ms for result in results) // repeats
    print(f"\nTotal Average Time for {label} over {repeats} tests: {average} ms\n")
    return results


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="patternbench",
        description="Time multi-threaded pattern counting over a text file.",
    )
    parser.add_argument("path", nargs="?", default=DEFAULT_FILENAME)
    parser.add_argument("--pattern", default=DEFAULT_PATTERN)
    parser.add_argument(
        "--algorithm",
        choices=[item.value for item in Algorithm],
        default=Algorithm.BOYER_MOORE.value,
    )
    parser.add_argument("--workers", type=int, default=DEFAULT_WORKERS)
    parser.add_argument("--lines", type=int, default=TOTAL_LINES)
    parser.add_argument("--repeats", type=int, default=TEST_AMOUNT)
    parser.add_argument("--label", default=DEFAULT_LABEL)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry point."""
    args = _build_parser().parse_args(argv)
    try:
        run_tests(
            args.path,
            args.pattern,
            Algorithm(args.algorithm),
            args.workers,
            args.lines,
            args.repeats,
            args.label,
        )
    except OSError as error:
        print(f"Failed to open file: {error}", file=sys.stderr)
        return 1
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())