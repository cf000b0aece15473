#!/usr/bin/env python3
''' test the mixer reducer '''

import pytest

from mixboard.mixer import apply_mixer_field
from mixboard.state import MixerState


@pytest.mark.parametrize(
    "key,attr",
    [
        ("CH1faderPosition", "ch1_fader"),
        ("CH2faderPosition", "ch2_fader"),
        ("CH3faderPosition", "ch3_fader"),
        ("CH4faderPosition", "ch4_fader"),
        ("CrossfaderPosition", "crossfader"),
    ],
)
def test_faders(key, attr):
    ''' every fader lands in its slot '''
    mixer = MixerState()
    assert apply_mixer_field(mixer, key, "0.75")
    assert getattr(mixer, attr) == 0.75


def test_garbage_is_zero():
    ''' junk values become 0 '''
    mixer = MixerState()
    apply_mixer_field(mixer, "CrossfaderPosition", "left")
    assert mixer.crossfader == 0.0


def test_unknown_key():
    ''' unknown mixer keys are ignored '''
    mixer = MixerState()
    assert not apply_mixer_field(mixer, "CH5faderPosition", 1.0)
    assert mixer == MixerState()


def test_defaults():
    ''' crossfader starts centred '''
    mixer = MixerState()
    assert mixer.crossfader == 0.5
    assert mixer.ch1_fader == 0.0
