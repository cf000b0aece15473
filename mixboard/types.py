#!/usr/bin/env python3
"""Type definitions for the structures handed to Mixboard by a protocol adapter."""

from typing import Any, TypedDict

# PlayerStatus keys follow the names the StagelinQ adapter uses on the
# wire, hence the camelCase.
# pylint: disable=invalid-name


class Hotcue(TypedDict, total=False):
    """a hotcue as reported in a player status; treated as opaque"""

    state: bool
    color: str


class PlayerStatus(TypedDict, total=False):
    """Higher level deck status. All fields are optional."""

    # which deck
    deck: str
    player: int
    layer: str

    # device identity
    address: str
    port: int
    source: str
    deviceId: str

    # track
    title: str
    artist: str
    songLoaded: bool
    hasTrackData: bool
    trackNetworkPath: str
    trackPath: str
    fileLocation: str
    dbSourceName: str

    # transport and tempo
    play: bool
    playState: bool
    currentBpm: float
    trackBpm: float
    speed: float
    syncMode: int
    masterStatus: bool
    masterTempo: float
    externalMixerVolume: float
    jogColor: Any

    hotcue1: Hotcue
    hotcue2: Hotcue
    hotcue3: Hotcue
    hotcue4: Hotcue
    hotcue5: Hotcue
    hotcue6: Hotcue
    hotcue7: Hotcue
    hotcue8: Hotcue


class BeatFrame(TypedDict, total=False):
    """one deck's entry in a beat-info message"""

    beat: float
    totalBeats: float
    samples: float


class DeviceInfo(TypedDict):
    """identity sent with deviceReady / deviceDisconnected events"""

    ip: str
    deviceName: str
    softwareName: str
    softwareVersion: str
