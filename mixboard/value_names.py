"""
StagelinQ Value Names

This module provides constants for the StagelinQ state value names
Mixboard understands.
"""

# Global constants
CLIENT_LIBRARIAN_DEVICES_CONTROLLER_HAS_SD_CARD_CONNECTED = (
    "/Client/Librarian/DevicesController/HasSDCardConnected"
)
CLIENT_LIBRARIAN_DEVICES_CONTROLLER_HAS_USB_DEVICE_CONNECTED = (
    "/Client/Librarian/DevicesController/HasUsbDeviceConnected"
)
ENGINE_DECK_COUNT = "/Engine/DeckCount"
GUI_DECKS_DECK_ACTIVE_DECK = "/GUI/Decks/Deck/ActiveDeck"
MIXER_CH1_FADER_POSITION = "/Mixer/CH1faderPosition"
MIXER_CH2_FADER_POSITION = "/Mixer/CH2faderPosition"
MIXER_CH3_FADER_POSITION = "/Mixer/CH3faderPosition"
MIXER_CH4_FADER_POSITION = "/Mixer/CH4faderPosition"
MIXER_CROSSFADER_POSITION = "/Mixer/CrossfaderPosition"


class DeckValueNames:
    """Helper class for generating deck-specific value names."""

    def __init__(self, deck_index: int):
        self.deck_index = deck_index

    def track_artist_name(self) -> str:
        return f"/Engine/Deck{self.deck_index}/Track/ArtistName"

    def track_cue_position(self) -> str:
        return f"/Engine/Deck{self.deck_index}/Track/CuePosition"

    def track_current_bpm(self) -> str:
        return f"/Engine/Deck{self.deck_index}/Track/CurrentBPM"

    def track_current_key_index(self) -> str:
        return f"/Engine/Deck{self.deck_index}/Track/CurrentKeyIndex"

    def track_current_loop_in_position(self) -> str:
        return f"/Engine/Deck{self.deck_index}/Track/CurrentLoopInPosition"

    def track_current_loop_out_position(self) -> str:
        return f"/Engine/Deck{self.deck_index}/Track/CurrentLoopOutPosition"

    def track_current_loop_size_in_beats(self) -> str:
        return f"/Engine/Deck{self.deck_index}/Track/CurrentLoopSizeInBeats"

    def track_key_lock(self) -> str:
        return f"/Engine/Deck{self.deck_index}/Track/KeyLock"

    def track_loop_enable_state(self) -> str:
        return f"/Engine/Deck{self.deck_index}/Track/LoopEnableState"

    def track_sample_rate(self) -> str:
        return f"/Engine/Deck{self.deck_index}/Track/SampleRate"

    def track_song_analyzed(self) -> str:
        return f"/Engine/Deck{self.deck_index}/Track/SongAnalyzed"

    def track_song_loaded(self) -> str:
        return f"/Engine/Deck{self.deck_index}/Track/SongLoaded"

    def track_song_name(self) -> str:
        return f"/Engine/Deck{self.deck_index}/Track/SongName"

    def track_track_length(self) -> str:
        return f"/Engine/Deck{self.deck_index}/Track/TrackLength"

    def track_track_name(self) -> str:
        return f"/Engine/Deck{self.deck_index}/Track/TrackName"

    def track_track_network_path(self) -> str:
        return f"/Engine/Deck{self.deck_index}/Track/TrackNetworkPath"

    def current_bpm(self) -> str:
        return f"/Engine/Deck{self.deck_index}/CurrentBPM"

    def deck_is_master(self) -> str:
        return f"/Engine/Deck{self.deck_index}/DeckIsMaster"

    def external_mixer_volume(self) -> str:
        return f"/Engine/Deck{self.deck_index}/ExternalMixerVolume"

    def external_scratch_wheel_touch(self) -> str:
        return f"/Engine/Deck{self.deck_index}/ExternalScratchWheelTouch"

    def play(self) -> str:
        return f"/Engine/Deck{self.deck_index}/Play"

    def play_state(self) -> str:
        return f"/Engine/Deck{self.deck_index}/PlayState"

    def play_state_path(self) -> str:
        return f"/Engine/Deck{self.deck_index}/PlayStatePath"

    def speed(self) -> str:
        return f"/Engine/Deck{self.deck_index}/Speed"

    def speed_range(self) -> str:
        return f"/Engine/Deck{self.deck_index}/SpeedRange"

    def sync_mode(self) -> str:
        return f"/Engine/Deck{self.deck_index}/SyncMode"

    def client_deck_is_master(self) -> str:
        return f"/Client/Deck{self.deck_index}/DeckIsMaster"

    def client_jog_color(self) -> str:
        return f"/Client/Deck{self.deck_index}/JogColor"


# Pre-defined deck instances
EngineDeck1 = DeckValueNames(1)
EngineDeck2 = DeckValueNames(2)
EngineDeck3 = DeckValueNames(3)
EngineDeck4 = DeckValueNames(4)
