#!/usr/bin/env python3
"""
Musical key lookup

Engine firmware reports the detected key of a track as an index. This
module turns that index into Camelot / Open Key notation.
"""

from types import MappingProxyType

KEY_INDEX_TABLE: MappingProxyType[int, str] = MappingProxyType(
    {
        0: "1A (A♭m)",
        1: "1B (B)",
        2: "2A (E♭m)",
        3: "2B (F♯)",
        4: "3A (B♭m)",
        5: "3B (D♭)",
        6: "4A (Fm)",
        7: "4B (A♭)",
        8: "5A (Cm)",
        9: "5B (E♭)",
        10: "6A (Gm)",
        11: "6B (B♭)",
        12: "7A (Dm)",
        13: "7B (F)",
        14: "8A (Am)",
        15: "8B (C)",
        16: "9A (Em)",
        17: "9B (G)",
        18: "10A (Bm)",
        19: "10B (D)",
        20: "11A (F♯m)",
        21: "11B (A)",
        22: "12A (D♭m)",
        23: "12B (E)",
    }
)


def resolve_key(index: int | None) -> str:
    """return the label for a key index, or an empty string if unknown"""
    if index is None:
        return ""
    return KEY_INDEX_TABLE.get(index, "")
