"""Splitting of command lines into words and arguments."""

import re

_BLANKS = re.compile(r"[ \t\n]+")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def split_words(text, sep=" "):
    """Split ``text`` on runs of ``sep``, dropping empty words."""
    if not text:
        return []
    return [word for word in text.split(sep) if word]


def _tokens(text):
    return [word for word in _BLANKS.split(text) if word]


def has_arg_count(command, offset, expected):
    """Tell whether ``command[offset:]`` holds exactly ``expected`` arguments."""
    return len(_tokens(command[offset:])) == expected


def args_after(command, offset, count):
    """Return at most ``count`` blank-separated arguments after ``offset``."""
    return _tokens(command[offset:])[:count]


def _atoi(text):
    """Leading decimal integer of ``text``, 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0