#!/usr/bin/env python3
"""
Player status merger

The StagelinQ adapter also emits a higher level PlayerStatus object on
track load and state change. Unlike the path stream, this merge is
presence based: a key that is present is applied even when its value is
falsy, a key that is absent leaves the deck alone.
"""

from collections.abc import Mapping
from typing import Any, Callable

from mixboard import utils
from mixboard.state import DECK_NUMBERS, HOTCUE_COUNT, DeckState, StateTree
from mixboard.types import PlayerStatus

DECK_LETTERS: dict[str, int] = {
    "A": 1,
    "B": 2,
    "C": 3,
    "D": 4,
    "1": 1,
    "2": 2,
    "3": 3,
    "4": 4,
}

StatusHandler = Callable[[DeckState, Any], None]


def resolve_deck_number(status: Mapping[str, Any]) -> int | None:
    """deck number from the deck letter, falling back to the player index

    When a deck identifier is present it wins, even if it turns out to be
    unusable.
    """
    if deck_id := status.get("deck"):
        return DECK_LETTERS.get(str(deck_id).strip().upper())
    if player := status.get("player"):
        number = utils.to_int(player)
        return number if number in DECK_NUMBERS else None
    return None


def _title(deck: DeckState, value: Any) -> None:
    # sources differ in which of the two they fill in
    deck.track_name = utils.to_str(value)
    deck.song_name = deck.track_name


def _positive_bpm(attr: str) -> StatusHandler:
    def handler(deck: DeckState, value: Any) -> None:
        if utils.is_positive_number(value):
            setattr(deck, attr, utils.to_float(value))

    return handler


def _string(attr: str) -> StatusHandler:
    def handler(deck: DeckState, value: Any) -> None:
        setattr(deck, attr, utils.to_str(value))

    return handler


def _boolean(attr: str) -> StatusHandler:
    def handler(deck: DeckState, value: Any) -> None:
        setattr(deck, attr, utils.to_bool(value))

    return handler


def _number(attr: str) -> StatusHandler:
    def handler(deck: DeckState, value: Any) -> None:
        setattr(deck, attr, utils.to_float(value))

    return handler


def _sync_mode(deck: DeckState, value: Any) -> None:
    deck.sync_mode = utils.to_int(value)


def _track_path(deck: DeckState, value: Any) -> None:
    deck.track_path = utils.to_str(value)
    deck.track_uri = deck.track_path


def _jog_color(deck: DeckState, value: Any) -> None:
    deck.jog_color = value


STATUS_HANDLERS: dict[str, StatusHandler] = {
    "title": _title,
    "artist": _string("artist_name"),
    "songLoaded": _boolean("song_loaded"),
    "play": _boolean("play"),
    "playState": _boolean("play_state"),
    "currentBpm": _positive_bpm("current_bpm"),
    "trackBpm": _positive_bpm("track_bpm"),
    "speed": _number("speed"),
    "syncMode": _sync_mode,
    "masterStatus": _boolean("deck_is_master"),
    "masterTempo": _number("master_tempo"),
    "externalMixerVolume": _number("external_mixer_volume"),
    "trackNetworkPath": _string("track_network_path"),
    "trackPath": _track_path,
    "dbSourceName": _string("db_source_name"),
    "jogColor": _jog_color,
}


def _apply_hotcues(deck: DeckState, status: Mapping[str, Any]) -> None:
    for index in range(1, HOTCUE_COUNT + 1):
        if descriptor := status.get(f"hotcue{index}"):
            if deck.hotcues is None:
                deck.hotcues = {}
            deck.hotcues[index] = descriptor


def apply_player_status(tree: StateTree, status: PlayerStatus | Mapping[str, Any] | None) -> int | None:
    """merge a PlayerStatus into the tree

    Returns the deck number that was updated, or None if the status was
    dropped because its deck could not be resolved.
    """
    if not status:
        return None

    deck_number = resolve_deck_number(status)
    if deck_number is None:
        return None
    deck = tree.get_deck(deck_number)
    if deck is None:
        return None

    for key, handler in STATUS_HANDLERS.items():
        if key in status:
            handler(deck, status[key])

    # trackPath is more specific than fileLocation
    if "trackPath" not in status and (location := status.get("fileLocation")):
        deck.track_uri = utils.to_str(location)

    _apply_hotcues(deck, status)

    if address := status.get("address"):
        tree.device.ip = utils.to_str(address)
    if source := status.get("source"):
        tree.device.name = utils.to_str(source)
    return deck_number
