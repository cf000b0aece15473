#!/usr/bin/env python3
"""
StateMap path dispatcher

Classifies a StagelinQ state path and hands the value to the right
reducer. The protocol surface is much larger than what Mixboard shows,
so anything not recognised is dropped without complaint.
"""

import enum
import logging
import re
import typing
from typing import Any

from mixboard import utils, value_names
from mixboard.deck import apply_deck_field
from mixboard.mixer import apply_mixer_field
from mixboard.state import DEFAULT_DECK_COUNT, StateTree

ENGINE_DECK_RE = re.compile(r"/Engine/Deck(\d)/(.*)")
CLIENT_DECK_RE = re.compile(r"/Client/Deck(\d)/(.*)")
MIXER_RE = re.compile(r"/Mixer/(.*)")
TRAILING_DIGITS_RE = re.compile(r"(\d+)\s*$")

# original track tempo, as opposed to the live CurrentBPM
TRACK_CURRENT_BPM = "Track/CurrentBPM"
TRACK_BPM_FIELD = "TrackBPM"
TRACK_PREFIX = "Track/"


class PathCategory(enum.Enum):
    """what part of the state tree a path belongs to"""

    DECK_ENGINE = "deck-engine"
    DECK_CLIENT = "deck-client"
    MIXER = "mixer"
    DEVICE_CAPABILITY = "device-capability"
    DEVICE_GUI = "device-gui"
    UNKNOWN = "unknown"


class Route(typing.NamedTuple):
    """result of classifying a path"""

    category: PathCategory
    field: str = ""
    deck_number: int | None = None


DEVICE_FLAGS: dict[str, str] = {
    value_names.CLIENT_LIBRARIAN_DEVICES_CONTROLLER_HAS_SD_CARD_CONNECTED: "has_sd_card",
    value_names.CLIENT_LIBRARIAN_DEVICES_CONTROLLER_HAS_USB_DEVICE_CONNECTED: "has_usb",
}


def normalize_engine_field(rest: str) -> str:
    """flatten the Track/ sub-namespace of an engine deck path"""
    if rest == TRACK_CURRENT_BPM:
        return TRACK_BPM_FIELD
    return rest.removeprefix(TRACK_PREFIX)


def classify(path: str) -> Route:
    """work out where a path goes without touching any state"""
    if not path:
        return Route(PathCategory.UNKNOWN)

    if match := ENGINE_DECK_RE.search(path):
        return Route(
            PathCategory.DECK_ENGINE,
            field=normalize_engine_field(match.group(2)),
            deck_number=int(match.group(1)),
        )

    if match := MIXER_RE.search(path):
        return Route(PathCategory.MIXER, field=match.group(1))

    if "DeckCount" in path:
        return Route(PathCategory.DEVICE_CAPABILITY, field="deck_count")

    if match := CLIENT_DECK_RE.search(path):
        return Route(
            PathCategory.DECK_CLIENT, field=match.group(2), deck_number=int(match.group(1))
        )

    if path in DEVICE_FLAGS:
        return Route(PathCategory.DEVICE_CAPABILITY, field=DEVICE_FLAGS[path])

    if path == value_names.GUI_DECKS_DECK_ACTIVE_DECK:
        return Route(PathCategory.DEVICE_GUI, field="active_deck")

    return Route(PathCategory.UNKNOWN)


def parse_active_deck(value: Any) -> int:
    """ActiveDeck arrives as 2, '2' or 'Deck2'; anything else means deck 1"""
    if number := utils.to_int(value):
        return number
    if match := TRAILING_DIGITS_RE.search(utils.to_str(value)):
        return int(match.group(1)) or 1
    return 1


def parse_deck_count(value: Any) -> int:
    """DeckCount, falling back to a two deck unit"""
    return utils.to_int(value) or DEFAULT_DECK_COUNT


class PathDispatcher:
    """routes StateMap path/value pairs into a StateTree"""

    def dispatch(self, tree: StateTree, path: str, value: Any) -> PathCategory:
        """apply one path/value update; returns how it was classified"""
        route = classify(path)

        if route.category in (PathCategory.DECK_ENGINE, PathCategory.DECK_CLIENT):
            self._apply_deck(tree, route, value)
        elif route.category == PathCategory.MIXER:
            apply_mixer_field(tree.mixer, route.field, value)
        elif route.category == PathCategory.DEVICE_CAPABILITY:
            self._apply_capability(tree, route, value)
        elif route.category == PathCategory.DEVICE_GUI:
            tree.device.active_deck = parse_active_deck(value)
        else:
            logging.debug("Dropping %s", path)
        return route.category

    @staticmethod
    def _apply_deck(tree: StateTree, route: Route, value: Any) -> None:
        deck = tree.get_deck(route.deck_number)
        if deck is None:
            return
        if "bpm" in route.field.lower():
            logging.debug("Deck %d %s: %s", route.deck_number, route.field, value)
        apply_deck_field(deck, route.field, value)

    @staticmethod
    def _apply_capability(tree: StateTree, route: Route, value: Any) -> None:
        if route.field == "deck_count":
            tree.device.deck_count = parse_deck_count(value)
        else:
            setattr(tree.device, route.field, utils.to_bool(value))
