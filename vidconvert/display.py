"""Formatting of lists for terminal output."""

from __future__ import annotations

from typing import Iterable


def list_to_string(
    items: Iterable[object],
    pre: str = "[ ",
    separator: str = ",",
    post: str = " ]",
) -> str:
    """Join items between a prefix and a suffix."""
    return pre + separator.join(str(item) for item in items) + post