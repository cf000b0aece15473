#!/usr/bin/env python3
"""
Demo source

Feeds the engine a believable four deck setup without any hardware on
the network. Everything goes through the same commands a real adapter
would send, so demo mode exercises the whole reduction path.
"""

import asyncio
import contextlib
import logging
import math
import random

from mixboard import value_names
from mixboard.engine import (
    Command,
    DeviceConnected,
    RawStateChange,
    StateEngine,
)
from mixboard.value_names import EngineDeck1, EngineDeck2

DEMO_IP = "169.254.13.37"
DEMO_NAME = "Denon Prime 4 (Demo)"
DEMO_SOFTWARE = "JP11"
DEMO_VERSION = "3.4.0"
DEMO_SAMPLE_RATE = 44100


def _seconds(value: float) -> int:
    return round(value * DEMO_SAMPLE_RATE)


def seed_commands() -> list[Command]:
    """the commands that build the initial demo state"""
    commands: list[Command] = [
        DeviceConnected(
            ip=DEMO_IP,
            name=DEMO_NAME,
            software_name=DEMO_SOFTWARE,
            software_version=DEMO_VERSION,
        ),
        RawStateChange(value_names.ENGINE_DECK_COUNT, 4),
    ]

    # deck 1 is playing
    deck = EngineDeck1
    commands += [
        RawStateChange(deck.track_sample_rate(), DEMO_SAMPLE_RATE),
        RawStateChange(deck.track_song_name(), "Strobe"),
        RawStateChange(deck.track_artist_name(), "deadmau5"),
        RawStateChange(deck.track_track_length(), _seconds(637.8)),
        RawStateChange(deck.track_song_loaded(), True),
        RawStateChange(deck.track_song_analyzed(), True),
        RawStateChange(deck.play(), True),
        RawStateChange(deck.play_state(), True),
        RawStateChange(deck.current_bpm(), 128.0),
        RawStateChange(deck.track_current_bpm(), 128.0),
        RawStateChange(deck.speed_range(), 0.08),
        RawStateChange(deck.sync_mode(), 1),
        RawStateChange(deck.deck_is_master(), True),
        RawStateChange(deck.track_current_key_index(), 14),
        RawStateChange(deck.track_key_lock(), True),
        RawStateChange(deck.external_mixer_volume(), 0.8),
        RawStateChange(deck.track_cue_position(), _seconds(32.5)),
        RawStateChange(deck.track_current_loop_size_in_beats(), 4),
    ]

    # deck 2 is cued with a loop set
    deck = EngineDeck2
    commands += [
        RawStateChange(deck.track_sample_rate(), DEMO_SAMPLE_RATE),
        RawStateChange(deck.track_song_name(), "Opus"),
        RawStateChange(deck.track_artist_name(), "Eric Prydz"),
        RawStateChange(deck.track_track_length(), _seconds(540.2)),
        RawStateChange(deck.track_song_loaded(), True),
        RawStateChange(deck.track_song_analyzed(), True),
        RawStateChange(deck.current_bpm(), 126.5),
        RawStateChange(deck.track_current_bpm(), 126.0),
        RawStateChange(deck.speed(), 0.004),
        RawStateChange(deck.speed_range(), 0.08),
        RawStateChange(deck.sync_mode(), 1),
        RawStateChange(deck.track_current_key_index(), 8),
        RawStateChange(deck.track_cue_position(), _seconds(16.0)),
        RawStateChange(deck.track_loop_enable_state(), True),
        RawStateChange(deck.track_current_loop_in_position(), _seconds(64.0)),
        RawStateChange(deck.track_current_loop_out_position(), _seconds(80.0)),
        RawStateChange(deck.track_current_loop_size_in_beats(), 8),
    ]

    commands += [
        RawStateChange(value_names.MIXER_CH1_FADER_POSITION, 0.85),
        RawStateChange(value_names.MIXER_CROSSFADER_POSITION, 0.5),
    ]
    return commands


def tick_commands(tick: int, rng: random.Random) -> list[Command]:
    """small wobbles so a UI has something to animate"""
    return [
        RawStateChange(EngineDeck1.current_bpm(), 128.0 + math.sin(tick * 0.1) * 0.02),
        RawStateChange(value_names.MIXER_CROSSFADER_POSITION, 0.5 + math.sin(tick * 0.05) * 0.1),
        RawStateChange(EngineDeck1.external_mixer_volume(), 0.78 + rng.random() * 0.04),
    ]


class DemoSource:
    """simulated hardware driving a StateEngine"""

    def __init__(self, engine: StateEngine, interval: float = 0.5, rng: random.Random | None = None):
        self.engine = engine
        self.interval = interval
        self.rng = rng or random.Random()
        self.tick = 0
        self.loop_task: asyncio.Task[None] | None = None

    def seed(self) -> None:
        """push the initial demo state"""
        logging.info("Starting in demo mode")
        for command in seed_commands():
            self.engine.submit(command)

    def step(self) -> None:
        """advance the simulation by one tick"""
        self.tick += 1
        for command in tick_commands(self.tick, self.rng):
            self.engine.submit(command)

    async def loop(self) -> None:
        """tick until cancelled"""
        while True:
            await asyncio.sleep(self.interval)
            self.step()

    async def start(self) -> None:
        """seed the engine and start ticking"""
        self.seed()
        self.loop_task = asyncio.create_task(self.loop())

    async def stop(self) -> None:
        """stop ticking; the engine keeps whatever state it has"""
        if self.loop_task:
            _ = self.loop_task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self.loop_task
            self.loop_task = None


async def switch_mode(
    engine: StateEngine, source: DemoSource | None, demo: bool, interval: float = 0.5
) -> DemoSource | None:
    """stop the current source, wipe the state and start over in the requested mode

    Returns the new demo source, or None when switching to live mode; the
    live adapter is expected to start feeding the engine itself.
    """
    logging.info("Switching to %s mode", "demo" if demo else "live")
    if source:
        await source.stop()
    engine.reset()
    if not demo:
        return None
    newsource = DemoSource(engine, interval=interval)
    await newsource.start()
    return newsource
