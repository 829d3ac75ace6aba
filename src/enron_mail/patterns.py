"""Precompiled patterns for pulling addresses and names out of header text."""

from __future__ import annotations

import re
from typing import List

EMAIL_ADDRESS_PATTERN = re.compile(r"[\w._%+-]+@[\w.-]+\.[A-Za-z]{2,}", re.ASCII)
NAME_PATTERN = re.compile(r"[a-zA-ZÀ-ÿ0-9 ()-]+")
_ANGLE_GROUP_PATTERN = re.compile(r"<[^>]*>")


def extract_addresses(text: str) -> List[str]:
    """Return every email address found in ``text``, in order of appearance."""
    return EMAIL_ADDRESS_PATTERN.findall(text)


def extract_names(text: str) -> List[str]:
    """
    Return the display-name tokens found in ``text``.

    Each comma-separated segment is stripped of ``<...>`` groups and bare
    addresses; whatever remains counts as a name only if it consists entirely
    of name characters.
    """
    names: List[str] = []
    for segment in text.split(","):
        remainder = _ANGLE_GROUP_PATTERN.sub(" ", segment)
        remainder = EMAIL_ADDRESS_PATTERN.sub(" ", remainder).strip()
        if remainder and NAME_PATTERN.fullmatch(remainder):
            names.append(remainder)
    return names


def split_on_commas(text: str) -> List[str]:
    """Split on commas, trimming each piece and dropping empty ones."""
    return [piece.strip() for piece in text.split(",") if piece.strip()]


__all__ = [
    "EMAIL_ADDRESS_PATTERN",
    "NAME_PATTERN",
    "extract_addresses",
    "extract_names",
    "split_on_commas",
]
