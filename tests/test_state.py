#!/usr/bin/env python3
''' test the state tree '''

from mixboard.state import DECK_NUMBERS, ConnectionPhase, DeckState, StateTree


def test_empty_tree():
    ''' four decks, disconnected, two deck default '''
    tree = StateTree()
    assert set(tree.decks) == set(DECK_NUMBERS)
    assert tree.device.connection_state == ConnectionPhase.DISCONNECTED
    assert tree.device.deck_count == 2
    assert tree.device.active_deck == 1
    assert tree.mixer.crossfader == 0.5


def test_empty_deck():
    ''' nothing loaded, nothing known '''
    deck = DeckState()
    assert deck.song_loaded is False
    assert deck.track_name == ""
    assert deck.current_bpm == 0.0
    assert deck.sample_rate == 0
    assert deck.current_key_index == -1
    assert deck.artwork is None
    assert deck.hotcues is None


def test_get_deck():
    ''' only 1-4 exist '''
    tree = StateTree()
    assert tree.get_deck(1) is tree.decks[1]
    assert tree.get_deck(0) is None
    assert tree.get_deck(5) is None


def test_snapshot_is_a_copy():
    ''' mutating a snapshot does not touch the tree '''
    tree = StateTree()
    tree.get_deck(1).hotcues = {1: {"state": True}}
    snap = tree.snapshot()
    snap["decks"][1]["track_name"] = "changed"
    snap["decks"][1]["hotcues"][1]["state"] = False
    snap["mixer"]["crossfader"] = 0.0
    assert tree.get_deck(1).track_name == ""
    assert tree.get_deck(1).hotcues[1]["state"] is True
    assert tree.mixer.crossfader == 0.5


def test_snapshot_shape():
    ''' plain dicts keyed the way subscribers expect '''
    snap = StateTree().snapshot()
    assert set(snap) == {"decks", "mixer", "device"}
    assert snap["device"]["connection_state"] == "disconnected"
    assert snap["decks"][4]["song_loaded"] is False
