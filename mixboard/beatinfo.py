#!/usr/bin/env python3
"""
Beat info merger

BeatInfo frames carry the live beat counter and playhead (in samples)
for every deck, in deck order. Frames may be plain dicts from the
adapter or PlayerInfo-style objects with attributes.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from mixboard import units, utils
from mixboard.state import StateTree
from mixboard.types import BeatFrame


def _frame_value(frame: BeatFrame | Any, *names: str) -> Any:
    for name in names:
        if isinstance(frame, Mapping):
            if name in frame:
                return frame[name]
        elif hasattr(frame, name):
            return getattr(frame, name)
    return None


def apply_beat_info(tree: StateTree, frames: Sequence[BeatFrame | Any] | None) -> list[int]:
    """apply a beat-info message; returns the deck numbers touched"""
    touched: list[int] = []
    if not frames:
        return touched

    for deck_number, frame in enumerate(frames, start=1):
        deck = tree.get_deck(deck_number)
        if deck is None or frame is None:
            continue
        deck.beat_position = utils.to_float(_frame_value(frame, "beat"))
        deck.total_beats = utils.to_float(_frame_value(frame, "totalBeats", "total_beats"))
        if samples := utils.to_float(_frame_value(frame, "samples")):
            seconds = units.samples_to_seconds(samples, deck.sample_rate)
            if seconds is not None:
                deck.current_position = seconds
        touched.append(deck_number)
    return touched
