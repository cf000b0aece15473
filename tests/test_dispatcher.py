#!/usr/bin/env python3
''' test StateMap path routing '''

import logging

import pytest

from mixboard import value_names
from mixboard.dispatcher import (
    PathCategory,
    PathDispatcher,
    classify,
    normalize_engine_field,
    parse_active_deck,
    parse_deck_count,
)
from mixboard.state import StateTree
from mixboard.value_names import EngineDeck1, EngineDeck2, EngineDeck3, EngineDeck4


@pytest.fixture
def dispatcher():
    ''' a fresh dispatcher '''
    return PathDispatcher()


@pytest.mark.parametrize(
    "rest,expected",
    [
        ("Track/CurrentBPM", "TrackBPM"),
        ("Track/SongName", "SongName"),
        ("CurrentBPM", "CurrentBPM"),
        ("Play", "Play"),
        ("Track/Track/Odd", "Track/Odd"),
    ],
)
def test_normalize_engine_field(rest, expected):
    ''' only the leading Track/ is stripped '''
    assert normalize_engine_field(rest) == expected


@pytest.mark.parametrize(
    "path,category,field,deck",
    [
        ("/Engine/Deck1/Play", PathCategory.DECK_ENGINE, "Play", 1),
        ("/Engine/Deck3/Track/ArtistName", PathCategory.DECK_ENGINE, "ArtistName", 3),
        ("/Client/Deck2/DeckIsMaster", PathCategory.DECK_CLIENT, "DeckIsMaster", 2),
        ("/Mixer/CrossfaderPosition", PathCategory.MIXER, "CrossfaderPosition", None),
        ("/Engine/DeckCount", PathCategory.DEVICE_CAPABILITY, "deck_count", None),
        (
            value_names.CLIENT_LIBRARIAN_DEVICES_CONTROLLER_HAS_SD_CARD_CONNECTED,
            PathCategory.DEVICE_CAPABILITY,
            "has_sd_card",
            None,
        ),
        (
            value_names.CLIENT_LIBRARIAN_DEVICES_CONTROLLER_HAS_USB_DEVICE_CONNECTED,
            PathCategory.DEVICE_CAPABILITY,
            "has_usb",
            None,
        ),
        ("/GUI/Decks/Deck/ActiveDeck", PathCategory.DEVICE_GUI, "active_deck", None),
        ("/Engine/Master/MasterTempo", PathCategory.UNKNOWN, "", None),
        ("", PathCategory.UNKNOWN, "", None),
    ],
)
def test_classify(path, category, field, deck):
    ''' classification does not need a tree '''
    route = classify(path)
    assert route.category == category
    assert route.field == field
    assert route.deck_number == deck


@pytest.mark.parametrize(
    "value,expected",
    [("Deck3", 3), (2, 2), ("2", 2), ("garbage", 1), (None, 1), ("Deck0", 1), ("DeckA", 1)],
)
def test_parse_active_deck(value, expected):
    ''' active deck tolerates several spellings '''
    assert parse_active_deck(value) == expected


@pytest.mark.parametrize("value,expected", [(4, 4), ("4", 4), (None, 2), ("junk", 2), (0, 2)])
def test_parse_deck_count(value, expected):
    ''' deck count falls back to 2 '''
    assert parse_deck_count(value) == expected


def test_track_bpm_isolated(dispatcher, tree):
    ''' Track/CurrentBPM is the original tempo, not the live one '''
    deck = tree.get_deck(1)
    deck.current_bpm = 124.0
    assert dispatcher.dispatch(tree, EngineDeck1.track_current_bpm(), 128.0) == PathCategory.DECK_ENGINE
    assert deck.track_bpm == 128.0
    assert deck.current_bpm == 124.0


def test_live_bpm(dispatcher, tree):
    ''' plain CurrentBPM is the live tempo '''
    dispatcher.dispatch(tree, EngineDeck1.current_bpm(), 129.5)
    assert tree.get_deck(1).current_bpm == 129.5
    assert tree.get_deck(1).track_bpm == 0.0


def test_cue_position_after_rate(dispatcher, tree):
    ''' rate then cue on deck 2 '''
    dispatcher.dispatch(tree, "/Engine/Deck2/SampleRate", 44100)
    dispatcher.dispatch(tree, EngineDeck2.track_cue_position(), 88200)
    deck = tree.get_deck(2)
    assert deck.cue_position_raw == 88200
    assert deck.cue_position == 2.0
    assert tree.get_deck(1).cue_position == 0.0


def test_rate_backfills_through_dispatcher(dispatcher, tree):
    ''' cue arrives before the rate '''
    dispatcher.dispatch(tree, EngineDeck3.track_cue_position(), 88200)
    assert tree.get_deck(3).cue_position == 0.0
    dispatcher.dispatch(tree, EngineDeck3.track_sample_rate(), 44100)
    assert tree.get_deck(3).cue_position == 2.0


def test_active_deck(dispatcher, tree):
    ''' the three spellings from the field '''
    dispatcher.dispatch(tree, value_names.GUI_DECKS_DECK_ACTIVE_DECK, "Deck3")
    assert tree.device.active_deck == 3
    dispatcher.dispatch(tree, value_names.GUI_DECKS_DECK_ACTIVE_DECK, 2)
    assert tree.device.active_deck == 2
    dispatcher.dispatch(tree, value_names.GUI_DECKS_DECK_ACTIVE_DECK, "garbage")
    assert tree.device.active_deck == 1


def test_deck_count(dispatcher, tree):
    ''' deck count lands on the device '''
    dispatcher.dispatch(tree, value_names.ENGINE_DECK_COUNT, 4)
    assert tree.device.deck_count == 4
    dispatcher.dispatch(tree, value_names.ENGINE_DECK_COUNT, None)
    assert tree.device.deck_count == 2


def test_media_flags(dispatcher, tree):
    ''' sd and usb presence '''
    dispatcher.dispatch(tree, value_names.CLIENT_LIBRARIAN_DEVICES_CONTROLLER_HAS_SD_CARD_CONNECTED, True)
    dispatcher.dispatch(tree, value_names.CLIENT_LIBRARIAN_DEVICES_CONTROLLER_HAS_USB_DEVICE_CONNECTED, 0)
    assert tree.device.has_sd_card is True
    assert tree.device.has_usb is False


def test_client_paths(dispatcher, tree):
    ''' client namespace shares the deck fields '''
    dispatcher.dispatch(tree, EngineDeck4.client_deck_is_master(), True)
    dispatcher.dispatch(tree, EngineDeck4.client_jog_color(), "#00ff00")
    assert tree.get_deck(4).deck_is_master is True
    assert tree.get_deck(4).jog_color == "#00ff00"


def test_mixer(dispatcher, tree):
    ''' mixer paths hit the mixer '''
    dispatcher.dispatch(tree, value_names.MIXER_CH3_FADER_POSITION, 0.3)
    dispatcher.dispatch(tree, value_names.MIXER_CROSSFADER_POSITION, "0.9")
    assert tree.mixer.ch3_fader == 0.3
    assert tree.mixer.crossfader == 0.9


def test_unknown_path_dropped(dispatcher, tree, caplog):
    ''' unknown paths change nothing and only log at debug '''
    caplog.set_level(logging.DEBUG)
    before = tree.snapshot()
    assert dispatcher.dispatch(tree, "/Engine/Sync/Network/MasterStatus", 1) == PathCategory.UNKNOWN
    assert tree.snapshot() == before
    assert "Dropping /Engine/Sync/Network/MasterStatus" in caplog.text


@pytest.mark.parametrize("path", ["/Engine/Deck5/Play", "/Engine/Deck0/Play", "/Client/Deck9/JogColor"])
def test_untracked_deck_numbers(dispatcher, tree, path):
    ''' deck numbers outside 1-4 are dropped '''
    before = tree.snapshot()
    dispatcher.dispatch(tree, path, True)
    assert tree.snapshot() == before


def test_unknown_deck_field(dispatcher, tree):
    ''' a new field name is not an error '''
    before = tree.snapshot()
    dispatcher.dispatch(tree, "/Engine/Deck1/Track/SomeNewThing", 7)
    assert tree.snapshot() == before


def test_garbage_values_never_raise(dispatcher):
    ''' resilience over strictness '''
    tree = StateTree()
    for path in (
        EngineDeck1.current_bpm(),
        EngineDeck1.track_sample_rate(),
        EngineDeck1.track_cue_position(),
        EngineDeck1.track_current_key_index(),
        EngineDeck1.play_state_path(),
        value_names.MIXER_CROSSFADER_POSITION,
        value_names.GUI_DECKS_DECK_ACTIVE_DECK,
    ):
        for value in (None, "junk", {"nested": True}, [1, 2], float("nan")):
            dispatcher.dispatch(tree, path, value)
    assert tree.get_deck(1).current_bpm == 0.0
    assert tree.device.active_deck == 1
