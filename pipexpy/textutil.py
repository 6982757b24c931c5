"""Small text helpers used to break up command lines and paths."""

from __future__ import annotations


def split_fields(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty fields."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [field for field in text.split(sep) if field]


def trim(text: str, chars: str) -> str:
    """Remove every leading and trailing character found in ``chars``."""
    return text.strip(chars)