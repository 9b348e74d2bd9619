"""Kata-style puzzles over sequences and text, and online-judge problems with a command line front end."""

__version__ = "0.1.0"