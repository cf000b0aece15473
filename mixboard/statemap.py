#!/usr/bin/env python3
"""
StateMap payload decoding

StateMap values travel as small JSON objects whose interesting member
depends on the value's type: numbers in "value", booleans in "state",
strings in "string" and colours in "color". The adapter hands us either
that object or an already unwrapped scalar.

Captured sessions are stored one JSON record per line in the same shape
the adapter emits, and command_from_record() turns them back into engine
commands:

    {"name": "/Engine/Deck1/Play", "json": {"type": 1, "state": true}}
    {"status": {"deck": "A", "title": "Strobe"}}
    {"decks": [{"beat": 1.0, "totalBeats": 400.0, "samples": 44100}]}
"""

import json
import logging
from collections.abc import Iterable, Iterator
from typing import Any

from mixboard.engine import BeatInfoUpdate, Command, PlayerStatusUpdate, RawStateChange

PAYLOAD_KEYS: tuple[str, ...] = ("value", "state", "string", "color")


def extract_value(payload: Any) -> Any:
    """unwrap a StateMap JSON payload into the scalar the reducers want"""
    if not isinstance(payload, dict):
        return payload
    for key in PAYLOAD_KEYS:
        if key in payload:
            return payload[key]
    return payload


def command_from_record(record: Any) -> Command | None:
    """build the engine command for one captured record, None if unrecognised"""
    if not isinstance(record, dict):
        return None
    if name := record.get("name") or record.get("path"):
        if "json" in record:
            return RawStateChange(name, extract_value(record["json"]))
        return RawStateChange(name, record.get("value"))
    if isinstance(record.get("status"), dict):
        return PlayerStatusUpdate(record["status"])
    if isinstance(record.get("decks"), list):
        return BeatInfoUpdate(record["decks"])
    return None


def read_capture(lines: Iterable[str]) -> Iterator[Command]:
    """commands from a newline-delimited JSON capture, skipping junk lines"""
    for lineno, line in enumerate(lines, start=1):
        line = line.strip()
        if not line:
            continue
        try:
            record = json.loads(line)
        except json.JSONDecodeError as error:
            logging.warning("Skipping capture line %d: %s", lineno, error)
            continue
        if command := command_from_record(record):
            yield command
        else:
            logging.debug("Nothing to do for capture line %d", lineno)
