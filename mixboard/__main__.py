#!/usr/bin/env python3
''' Mixboard as run via python -m '''

import asyncio
import contextlib
import logging
import pathlib
import platform
import signal
import sys
from typing import Any

import mixboard
import mixboard.bootstrap
import mixboard.config
import mixboard.demo
import mixboard.engine
import mixboard.statemap


def describe(snapshot: dict[str, Any]) -> str:
    ''' one line summary of a snapshot for the log '''
    parts = [f"{snapshot['device']['name'] or '-'} [{snapshot['device']['connection_state']}]"]
    for number, deck in snapshot["decks"].items():
        if not deck["song_loaded"]:
            continue
        state = "play" if deck["play"] else "stop"
        parts.append(
            f"{number}: {deck['artist_name']} - {deck['song_name']} "
            f"{deck['current_bpm']:.2f}bpm {deck['current_position']:.1f}/{deck['track_length']:.1f}s {state}"
        )
    parts.append(f"xf={snapshot['mixer']['crossfader']:.2f}")
    return " | ".join(parts)


def log_event(event: str, payload: Any) -> None:
    ''' subscriber that writes every event to the log '''
    if event == mixboard.engine.STATE_EVENT:
        logging.debug("%s", describe(payload))
    else:
        logging.info("%s: %s", event, payload)


def replay(engine: mixboard.engine.StateEngine, capture: pathlib.Path) -> None:
    ''' feed a recorded session through the engine '''
    logging.info("Replaying %s", capture)
    with open(capture, encoding="utf-8") as fhin:
        for command in mixboard.statemap.read_capture(fhin):
            engine.handle(command)
    print(describe(engine.get_snapshot()))


async def rundemo(engine: mixboard.engine.StateEngine,
                  config: mixboard.config.ConfigFile) -> None:  # pragma: no cover
    ''' run the demo source until interrupted '''
    stopevent = asyncio.Event()
    loop = asyncio.get_running_loop()
    for signum in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(signum, stopevent.set)
        except NotImplementedError:
            # windows
            pass

    enginetask = asyncio.create_task(engine.run())
    source = mixboard.demo.DemoSource(engine, interval=config.getrefreshinterval())
    await source.start()
    try:
        await stopevent.wait()
    finally:
        await source.stop()
        engine.shutdown()
        await enginetask


def main() -> None:  # pragma: no cover
    ''' main entrypoint '''
    mixboard.bootstrap.set_qt_names()
    logfile = mixboard.bootstrap.setuplogging(rotate=True)
    logging.info('starting up v%s on %s', mixboard.__version__, platform.platform())

    config = mixboard.config.ConfigFile(logpath=logfile)
    logging.getLogger().setLevel(config.loglevel)

    engine = mixboard.engine.StateEngine(config=config)
    engine.subscribe(log_event)

    if len(sys.argv) > 1:
        replay(engine, pathlib.Path(sys.argv[1]))
        return

    if not config.demo:
        logging.warning("No StagelinQ adapter is bundled; running the demo source instead")
    with contextlib.suppress(KeyboardInterrupt):
        asyncio.run(rundemo(engine, config))
    logging.info('shutting main down v%s', config.version)


if __name__ == '__main__':
    main()
