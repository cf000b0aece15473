#!/usr/bin/env python3
"""
State tree

The single mutable record of everything Mixboard knows about the
connected hardware: one DeviceState, one MixerState and a fixed set of
DeckState slots. Only the reducers write to it; everyone else gets a copy
from snapshot().
"""

import dataclasses
import enum
from typing import Any

DECK_COUNT = 4
DECK_NUMBERS: tuple[int, ...] = tuple(range(1, DECK_COUNT + 1))
HOTCUE_COUNT = 8
DEFAULT_DECK_COUNT = 2


class ConnectionPhase(str, enum.Enum):
    """where the device connection is in its lifecycle"""

    DISCONNECTED = "disconnected"
    DISCOVERING = "discovering"
    CONNECTED = "connected"
    ERROR = "error"


@dataclasses.dataclass
class DeckState:  # pylint: disable=too-many-instance-attributes
    """everything known about one deck"""

    # track identity
    track_name: str = ""
    artist_name: str = ""
    song_name: str = ""
    track_uri: str = ""
    track_network_path: str = ""
    track_path: str = ""
    db_source_name: str = ""
    artwork: bytes | None = None

    song_loaded: bool = False
    song_analyzed: bool = False

    # transport
    play: bool = False
    play_state: bool = False
    current_position: float = 0.0
    cue_position: float = 0.0
    cue_position_raw: float = 0.0

    # tempo
    current_bpm: float = 0.0
    track_bpm: float = 0.0
    speed: float = 0.0
    speed_range: float = 0.0
    sync_mode: int = 0
    deck_is_master: bool = False
    master_tempo: float = 0.0

    # key
    current_key_index: int = -1
    current_key: str = ""
    key_lock: bool = False

    # loop
    loop_enable_state: bool = False
    current_loop_in_position: float = 0.0
    current_loop_out_position: float = 0.0
    current_loop_size_in_beats: float = 0.0
    loop_in_raw: float = 0.0
    loop_out_raw: float = 0.0

    sample_rate: int = 0
    track_length: float = 0.0
    track_length_raw: float = 0.0

    beat_position: float = 0.0
    total_beats: float = 0.0

    external_scratch_wheel_touch: bool = False
    external_mixer_volume: float = 0.0
    jog_color: Any = None

    hotcues: dict[int, Any] | None = None


@dataclasses.dataclass
class MixerState:
    """channel faders and crossfader, 0.0 - 1.0"""

    ch1_fader: float = 0.0
    ch2_fader: float = 0.0
    ch3_fader: float = 0.0
    ch4_fader: float = 0.0
    crossfader: float = 0.5


@dataclasses.dataclass
class DeviceState:  # pylint: disable=too-many-instance-attributes
    """the device we are talking to"""

    name: str = ""
    ip: str = ""
    software_name: str = ""
    software_version: str = ""
    connection_state: ConnectionPhase = ConnectionPhase.DISCONNECTED
    deck_count: int = DEFAULT_DECK_COUNT
    has_sd_card: bool = False
    has_usb: bool = False
    active_deck: int = 1


def _empty_decks() -> dict[int, DeckState]:
    return {number: DeckState() for number in DECK_NUMBERS}


@dataclasses.dataclass
class StateTree:
    """device + mixer + decks"""

    decks: dict[int, DeckState] = dataclasses.field(default_factory=_empty_decks)
    mixer: MixerState = dataclasses.field(default_factory=MixerState)
    device: DeviceState = dataclasses.field(default_factory=DeviceState)

    def get_deck(self, deck_number: int) -> DeckState | None:
        """the deck in that slot, or None for untracked deck numbers"""
        return self.decks.get(deck_number)

    def snapshot(self) -> dict[str, Any]:
        """a deep, plain-dict copy that callers are free to mutate"""
        return {
            "decks": {number: dataclasses.asdict(deck) for number, deck in self.decks.items()},
            "mixer": dataclasses.asdict(self.mixer),
            "device": dataclasses.asdict(self.device),
        }
