"""Threaded, timed pattern counting in text files with Boyer-Moore or a finite automaton."""

__version__ = "0.1.0"

__all__ = ["automaton", "bench", "boyer_moore"]