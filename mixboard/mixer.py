#!/usr/bin/env python3
"""Mixer state reducer"""

import enum
from typing import Any

from mixboard import utils
from mixboard.state import MixerState


class MixerField(str, enum.Enum):
    """StateMap names under /Mixer/"""

    CH1_FADER_POSITION = "CH1faderPosition"
    CH2_FADER_POSITION = "CH2faderPosition"
    CH3_FADER_POSITION = "CH3faderPosition"
    CH4_FADER_POSITION = "CH4faderPosition"
    CROSSFADER_POSITION = "CrossfaderPosition"


MIXER_ATTRIBUTES: dict[MixerField, str] = {
    MixerField.CH1_FADER_POSITION: "ch1_fader",
    MixerField.CH2_FADER_POSITION: "ch2_fader",
    MixerField.CH3_FADER_POSITION: "ch3_fader",
    MixerField.CH4_FADER_POSITION: "ch4_fader",
    MixerField.CROSSFADER_POSITION: "crossfader",
}


def apply_mixer_field(mixer: MixerState, key: str, value: Any) -> bool:
    """set a fader from a raw value; False for keys we do not track"""
    try:
        field = MixerField(key)
    except ValueError:
        return False
    setattr(mixer, MIXER_ATTRIBUTES[field], utils.to_float(value))
    return True
