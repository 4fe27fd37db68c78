# Copyright (c) 2026 Pixelhue
# SPDX-License-Identifier: MIT

"""
Bounded, deduplicated history of picked colors.

History is a tuple of hex strings, newest first. Recording a color that is
already present leaves the history untouched (no move to front). New
colors are prepended and the oldest entries past capacity are dropped.
"""

from __future__ import annotations

HISTORY_CAPACITY = 12


def record(
    history: tuple[str, ...],
    hex_color: str,
    capacity: int = HISTORY_CAPACITY,
) -> tuple[str, ...]:
    """
    Return a new history with ``hex_color`` recorded.

    Args:
        history: Current history, newest first
        hex_color: Color to record
        capacity: Maximum number of entries kept

    Returns:
        The same tuple if the color is already present, otherwise a new
        tuple with the color first, truncated to ``capacity``
    """
    if capacity < 1:
        raise ValueError(f"History capacity must be >= 1, got {capacity}")
    if hex_color in history:
        return history
    return ((hex_color,) + tuple(history))[:capacity]
