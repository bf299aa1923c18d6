"""Post-processing of parsed score elements."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable

from vecscore.data import Event, ScoreElement, Tie


def process_ties(elements: Iterable[ScoreElement]) -> list[ScoreElement]:
    """Fold each tie marker into the preceding element.

    A tie lengthens the event before it by one unit and marks it tied. The
    element before a tie is consumed by it; if that element is not a simple
    event it is dropped, and a tie with nothing before it is ignored.
    """
    out: list[ScoreElement] = []
    for element in elements:
        if isinstance(element, Tie):
            if not out:
                continue
            previous = out.pop()
            if isinstance(previous, Event):
                out.append(replace(previous, tie=True, duration=previous.duration + 1.0))
        else:
            out.append(element)
    return out