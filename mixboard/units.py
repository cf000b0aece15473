#!/usr/bin/env python3
"""
Sample domain to time domain conversion

Engine reports track length, cue points and loop points as sample
counts. These only become seconds once the deck's sample rate is known,
which may happen before or after the sample counts themselves arrive.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mixboard.state import DeckState

# raw sample-count attribute -> seconds attribute
SAMPLE_DOMAIN_FIELDS: tuple[tuple[str, str], ...] = (
    ("track_length_raw", "track_length"),
    ("cue_position_raw", "cue_position"),
    ("loop_in_raw", "current_loop_in_position"),
    ("loop_out_raw", "current_loop_out_position"),
)


def samples_to_seconds(samples: float, sample_rate: int) -> float | None:
    """convert a sample count, or None if the rate is not known yet"""
    if sample_rate <= 0:
        return None
    return samples / sample_rate


def store_sample_value(deck: "DeckState", raw_attr: str, derived_attr: str, samples: float) -> None:
    """record a raw sample count and derive seconds if possible

    When the sample rate is unknown the derived attribute is left alone;
    backfill_derived() picks it up once the rate arrives.
    """
    setattr(deck, raw_attr, samples)
    seconds = samples_to_seconds(samples, deck.sample_rate)
    if seconds is not None:
        setattr(deck, derived_attr, seconds)


def backfill_derived(deck: "DeckState") -> None:
    """recompute every seconds field that has a known, nonzero raw count"""
    if deck.sample_rate <= 0:
        return
    for raw_attr, derived_attr in SAMPLE_DOMAIN_FIELDS:
        raw = getattr(deck, raw_attr)
        if raw:
            setattr(deck, derived_attr, raw / deck.sample_rate)
