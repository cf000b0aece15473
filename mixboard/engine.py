#!/usr/bin/env python3
"""
State engine

Owns the StateTree and is the only thing allowed to mutate it. Protocol
adapters hand it commands, one per update; each command is applied to
completion and then every subscriber receives a fresh snapshot.

Commands can be applied synchronously with handle(), or queued with
post() and drained in arrival order by run(). Either way there is one
writer and one mutation turn, so "last write wins" follows arrival order
across all channels.
"""

import asyncio
import dataclasses
import logging
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any, Callable

from mixboard.beatinfo import apply_beat_info
from mixboard.config import DEFAULT_RAW_LOG_COUNT
from mixboard.dispatcher import PathDispatcher
from mixboard.playerstatus import apply_player_status
from mixboard.state import ConnectionPhase, StateTree
from mixboard.types import DeviceInfo, PlayerStatus

if TYPE_CHECKING:
    import mixboard.config

STATE_EVENT = "state"
DEVICE_READY_EVENT = "deviceReady"
DEVICE_DISCONNECTED_EVENT = "deviceDisconnected"

EventCallback = Callable[[str, Any], None]


class MixboardError(Exception):
    """Base exception for misuse of the engine"""


@dataclasses.dataclass(frozen=True)
class RawStateChange:
    """one StateMap path/value pair"""

    path: str
    value: Any = None


@dataclasses.dataclass(frozen=True)
class PlayerStatusUpdate:
    """a higher level PlayerStatus object"""

    status: PlayerStatus | Mapping[str, Any]


@dataclasses.dataclass(frozen=True)
class BeatInfoUpdate:
    """per-deck beat frames, deck 1 first"""

    frames: Sequence[Any]


@dataclasses.dataclass(frozen=True)
class ConnectionPhaseChange:
    """the adapter moved to a new connection phase"""

    phase: ConnectionPhase


@dataclasses.dataclass(frozen=True)
class DeviceConnected:
    """a device finished connecting"""

    ip: str
    name: str = "Unknown"
    software_name: str = ""
    software_version: str = ""


@dataclasses.dataclass(frozen=True)
class DeviceDisconnected:
    """a device went away; an empty ip means whatever is connected"""

    ip: str = ""


@dataclasses.dataclass(frozen=True)
class Reset:
    """throw away everything and start from an empty tree"""


Command = (
    RawStateChange
    | PlayerStatusUpdate
    | BeatInfoUpdate
    | ConnectionPhaseChange
    | DeviceConnected
    | DeviceDisconnected
    | Reset
)


class StateEngine:  # pylint: disable=too-many-instance-attributes
    """single writer for the Mixboard state tree"""

    def __init__(self, config: "mixboard.config.ConfigFile | None" = None):
        self.config = config
        self.tree = StateTree()
        self.dispatcher = PathDispatcher()
        self.connected_ip: str | None = None
        self.rawlogcount: int = config.rawlogcount if config else DEFAULT_RAW_LOG_COUNT
        self._message_count = 0
        self._subscribers: list[EventCallback] = []
        self._queue: asyncio.Queue[Command | None] = asyncio.Queue()
        self._running = False

    @property
    def connected(self) -> bool:
        """true while a device is connected"""
        return self.connected_ip is not None

    @property
    def running(self) -> bool:
        """true while run() is draining the queue"""
        return self._running

    #### Subscribers

    def subscribe(self, callback: EventCallback) -> Callable[[], None]:
        """register for events; returns a function that unsubscribes"""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _notify(self, event: str, make_payload: Callable[[], Any]) -> None:
        # every subscriber gets its own copy
        for callback in list(self._subscribers):
            try:
                callback(event, make_payload())
            except Exception:  # pylint: disable=broad-exception-caught
                logging.exception("Subscriber failed handling %s", event)

    def get_snapshot(self) -> dict[str, Any]:
        """a full copy of the current state"""
        return self.tree.snapshot()

    #### Command handling

    def handle(self, command: Command) -> None:
        """apply one command now and broadcast the result"""
        events = self._apply(command)
        for event, payload in events:
            self._notify(event, lambda payload=payload: dict(payload))
        self._notify(STATE_EVENT, self.get_snapshot)

    def post(self, command: Command) -> None:
        """queue a command for run()"""
        self._queue.put_nowait(command)

    def submit(self, command: Command) -> None:
        """queue if run() is active, otherwise apply immediately"""
        if self._running:
            self.post(command)
        else:
            self.handle(command)

    def reset(self) -> None:
        """replace the whole tree with an empty one"""
        self.handle(Reset())

    async def run(self) -> None:
        """drain queued commands in order until shutdown() is called"""
        if self._running:
            raise MixboardError("StateEngine is already running")
        self._running = True
        try:
            while True:
                command = await self._queue.get()
                try:
                    if command is None:
                        break
                    self.handle(command)
                finally:
                    self._queue.task_done()
        finally:
            self._running = False

    def shutdown(self) -> None:
        """ask run() to stop once it reaches this point in the queue"""
        self._queue.put_nowait(None)

    async def join(self) -> None:
        """wait for everything queued so far to be applied"""
        await self._queue.join()

    def _apply(self, command: Command) -> list[tuple[str, Any]]:  # pylint: disable=too-many-return-statements
        if isinstance(command, RawStateChange):
            self._log_raw(command)
            self.dispatcher.dispatch(self.tree, command.path, command.value)
            return []
        if isinstance(command, PlayerStatusUpdate):
            apply_player_status(self.tree, command.status)
            return []
        if isinstance(command, BeatInfoUpdate):
            apply_beat_info(self.tree, command.frames)
            return []
        if isinstance(command, ConnectionPhaseChange):
            self.tree.device.connection_state = self._phase(command.phase)
            return []
        if isinstance(command, DeviceConnected):
            return self._device_connected(command)
        if isinstance(command, DeviceDisconnected):
            return self._device_disconnected(command)
        if isinstance(command, Reset):
            return self._reset()
        raise TypeError(f"Unknown command {command!r}")

    @staticmethod
    def _phase(phase: Any) -> ConnectionPhase:
        try:
            return ConnectionPhase(phase)
        except (TypeError, ValueError):
            logging.debug("Unknown connection phase %r", phase)
            return ConnectionPhase.ERROR

    def _log_raw(self, command: RawStateChange) -> None:
        self._message_count += 1
        if self._message_count <= self.rawlogcount:
            logging.info("Message #%d: %s => %s", self._message_count, command.path, command.value)
        elif self._message_count == self.rawlogcount + 1:
            logging.info("Further messages suppressed, data is flowing")

    def _device_info(self) -> DeviceInfo:
        device = self.tree.device
        return {
            "ip": device.ip,
            "deviceName": device.name,
            "softwareName": device.software_name,
            "softwareVersion": device.software_version,
        }

    def _device_connected(self, command: DeviceConnected) -> list[tuple[str, Any]]:
        device = self.tree.device
        device.ip = command.ip
        device.name = command.name
        device.software_name = command.software_name
        device.software_version = command.software_version
        device.connection_state = ConnectionPhase.CONNECTED
        self.connected_ip = command.ip
        logging.info(
            "Device connected: %s @ %s [%s/%s]",
            command.name,
            command.ip,
            command.software_name,
            command.software_version,
        )
        return [(DEVICE_READY_EVENT, self._device_info())]

    def _device_disconnected(self, command: DeviceDisconnected) -> list[tuple[str, Any]]:
        if command.ip and command.ip not in (self.connected_ip, self.tree.device.ip):
            logging.debug("Ignoring disconnect for %s, not connected", command.ip)
            return []
        return self._reset()

    def _reset(self) -> list[tuple[str, Any]]:
        events: list[tuple[str, Any]] = []
        if self.connected:
            info = self._device_info()
            logging.info("Device disconnected: %s @ %s", info["deviceName"], info["ip"])
            events.append((DEVICE_DISCONNECTED_EVENT, info))
        self.tree = StateTree()
        self.connected_ip = None
        self._message_count = 0
        return events
