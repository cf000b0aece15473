#!/usr/bin/env python3
"""
Deck state reducer

Applies one (field, value) update from the StateMap stream to a
DeckState. Every field Engine reports that we care about is listed in
DeckField; each one maps to a handler that coerces the raw value and, for
sample-domain fields, keeps the seconds counterpart in step.
"""

import enum
from typing import Any, Callable

from mixboard import keys, units, utils
from mixboard.state import DeckState


class DeckField(str, enum.Enum):
    """StateMap deck field names, after Track/ flattening"""

    ARTIST_NAME = "ArtistName"
    SONG_NAME = "SongName"
    TRACK_NAME = "TrackName"
    TRACK_URI = "TrackUri"
    TRACK_NETWORK_PATH = "TrackNetworkPath"
    TRACK_LENGTH = "TrackLength"
    SAMPLE_RATE = "SampleRate"
    SONG_LOADED = "SongLoaded"
    SONG_ANALYZED = "SongAnalyzed"
    PLAY = "Play"
    PLAY_STATE = "PlayState"
    PLAY_STATE_PATH = "PlayStatePath"
    CURRENT_BPM = "CurrentBPM"
    TRACK_BPM = "TrackBPM"
    SPEED = "Speed"
    SPEED_RANGE = "SpeedRange"
    SYNC_MODE = "SyncMode"
    DECK_IS_MASTER = "DeckIsMaster"
    MASTER_TEMPO = "MasterTempo"
    CURRENT_KEY_INDEX = "CurrentKeyIndex"
    KEY_LOCK = "KeyLock"
    EXTERNAL_SCRATCH_WHEEL_TOUCH = "ExternalScratchWheelTouch"
    EXTERNAL_MIXER_VOLUME = "ExternalMixerVolume"
    CUE_POSITION = "CuePosition"
    LOOP_ENABLE_STATE = "LoopEnableState"
    CURRENT_LOOP_IN_POSITION = "CurrentLoopInPosition"
    CURRENT_LOOP_OUT_POSITION = "CurrentLoopOutPosition"
    CURRENT_LOOP_SIZE_IN_BEATS = "CurrentLoopSizeInBeats"
    JOG_COLOR = "JogColor"

    @classmethod
    def lookup(cls, name: str) -> "DeckField | None":
        """the field for a protocol name, or None if we do not track it"""
        try:
            return cls(name)
        except ValueError:
            return None


DeckHandler = Callable[[DeckState, Any], None]


def _string(attr: str) -> DeckHandler:
    def handler(deck: DeckState, value: Any) -> None:
        setattr(deck, attr, utils.to_str(value))

    return handler


def _boolean(attr: str) -> DeckHandler:
    def handler(deck: DeckState, value: Any) -> None:
        setattr(deck, attr, utils.to_bool(value))

    return handler


def _number(attr: str) -> DeckHandler:
    def handler(deck: DeckState, value: Any) -> None:
        setattr(deck, attr, utils.to_float(value))

    return handler


def _samples(raw_attr: str, derived_attr: str) -> DeckHandler:
    def handler(deck: DeckState, value: Any) -> None:
        units.store_sample_value(deck, raw_attr, derived_attr, utils.to_float(value))

    return handler


def _song_name(deck: DeckState, value: Any) -> None:
    # SongName is what the player displays as the title
    deck.song_name = utils.to_str(value)
    deck.track_name = deck.song_name


def _sample_rate(deck: DeckState, value: Any) -> None:
    deck.sample_rate = max(utils.to_int(value), 0)
    units.backfill_derived(deck)


def _play_state_path(deck: DeckState, value: Any) -> None:
    """current position, either as a fraction of the track or as samples

    Firmware does not say which one it is sending. Anything above 1 is
    assumed to be a sample count; this is a heuristic, not a documented
    decode.
    """
    position = utils.to_float(value)
    if 0 <= position <= 1:
        if deck.track_length > 0:
            deck.current_position = position * deck.track_length
    elif position > 1:
        seconds = units.samples_to_seconds(position, deck.sample_rate)
        if seconds is not None:
            deck.current_position = seconds


def _key_index(deck: DeckState, value: Any) -> None:
    deck.current_key_index = utils.to_int(value, default=-1)
    deck.current_key = keys.resolve_key(deck.current_key_index)


def _key_lock(deck: DeckState, value: Any) -> None:
    # some firmware sends a bool, some sends 0/1
    deck.key_lock = value is True or utils.is_positive_number(value)


def _sync_mode(deck: DeckState, value: Any) -> None:
    deck.sync_mode = utils.to_int(value)


def _jog_color(deck: DeckState, value: Any) -> None:
    deck.jog_color = value


DECK_HANDLERS: dict[DeckField, DeckHandler] = {
    DeckField.ARTIST_NAME: _string("artist_name"),
    DeckField.SONG_NAME: _song_name,
    # TrackName carries the file path, not the title
    DeckField.TRACK_NAME: _string("track_uri"),
    DeckField.TRACK_URI: _string("track_uri"),
    DeckField.TRACK_NETWORK_PATH: _string("track_network_path"),
    DeckField.TRACK_LENGTH: _samples("track_length_raw", "track_length"),
    DeckField.SAMPLE_RATE: _sample_rate,
    DeckField.SONG_LOADED: _boolean("song_loaded"),
    DeckField.SONG_ANALYZED: _boolean("song_analyzed"),
    DeckField.PLAY: _boolean("play"),
    DeckField.PLAY_STATE: _boolean("play_state"),
    DeckField.PLAY_STATE_PATH: _play_state_path,
    DeckField.CURRENT_BPM: _number("current_bpm"),
    DeckField.TRACK_BPM: _number("track_bpm"),
    DeckField.SPEED: _number("speed"),
    DeckField.SPEED_RANGE: _number("speed_range"),
    DeckField.SYNC_MODE: _sync_mode,
    DeckField.DECK_IS_MASTER: _boolean("deck_is_master"),
    DeckField.MASTER_TEMPO: _number("master_tempo"),
    DeckField.CURRENT_KEY_INDEX: _key_index,
    DeckField.KEY_LOCK: _key_lock,
    DeckField.EXTERNAL_SCRATCH_WHEEL_TOUCH: _boolean("external_scratch_wheel_touch"),
    DeckField.EXTERNAL_MIXER_VOLUME: _number("external_mixer_volume"),
    DeckField.CUE_POSITION: _samples("cue_position_raw", "cue_position"),
    DeckField.LOOP_ENABLE_STATE: _boolean("loop_enable_state"),
    DeckField.CURRENT_LOOP_IN_POSITION: _samples("loop_in_raw", "current_loop_in_position"),
    DeckField.CURRENT_LOOP_OUT_POSITION: _samples("loop_out_raw", "current_loop_out_position"),
    DeckField.CURRENT_LOOP_SIZE_IN_BEATS: _number("current_loop_size_in_beats"),
    DeckField.JOG_COLOR: _jog_color,
}


def apply_deck_field(deck: DeckState, field_name: str, value: Any) -> bool:
    """apply one update to a deck

    Returns False if the field is not one we track, in which case the
    deck is untouched.
    """
    field = DeckField.lookup(field_name)
    if field is None:
        return False
    DECK_HANDLERS[field](deck, value)
    return True
