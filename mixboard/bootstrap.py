#!/usr/bin/env python3
"""bootstrap the app: Qt names for QSettings and the log file"""

import logging
import logging.handlers
import pathlib
import time

from PySide6.QtCore import QCoreApplication, QStandardPaths  # pylint: disable=no-name-in-module

LOGNAME = "mixboard.log"
LOGFORMAT = (
    "%(asctime)s %(levelname)s %(process)d %(threadName)s "
    "%(module)s:%(funcName)s:%(lineno)d %(message)s"
)


def set_qt_names(
    app: QCoreApplication | None = None,
    domain: str = "com.github.mixboard",
    appname: str = "Mixboard",
):
    """QSettings keys off these, so they must be set before any config is read"""
    if not app:
        app = QCoreApplication.instance()
    if not app:
        app = QCoreApplication()
    app.setOrganizationDomain(domain)
    app.setOrganizationName("mixboard")
    app.setApplicationName(appname)


def default_logdir() -> pathlib.Path:
    """Documents/<application>/logs"""
    return pathlib.Path(
        QStandardPaths.standardLocations(QStandardPaths.DocumentsLocation)[0],
        QCoreApplication.applicationName(),
        "logs",
    )


def _rollover(handler: logging.handlers.RotatingFileHandler) -> None:
    # another process may still hold the old file open on Windows
    for attempt in range(3):
        try:
            handler.doRollover()
            return
        except OSError as error:
            if attempt == 2:
                logging.warning("Could not rotate %s: %s", handler.baseFilename, error)
                return
            time.sleep(0.5 * (attempt + 1))


def setuplogging(
    logdir: pathlib.Path | str | None = None,
    logname: str = LOGNAME,
    rotate: bool = False,
    level: int | str = logging.DEBUG,
) -> pathlib.Path:
    """send the root logger to a rotating file; returns the full log file path

    logdir may also name a file, in which case that file is used.
    """
    logpath = pathlib.Path(logdir) if logdir else default_logdir()
    if logpath.is_file():
        logname = logpath.name
        logpath = logpath.parent
    logpath.mkdir(parents=True, exist_ok=True)
    logfile = logpath.joinpath(logname)

    needsrotation = rotate and logfile.exists()
    handler = logging.handlers.RotatingFileHandler(filename=logfile, backupCount=10, encoding="utf-8")
    if needsrotation:
        _rollover(handler)

    logging.basicConfig(
        format=LOGFORMAT,
        datefmt="%Y-%m-%dT%H:%M:%S%z",
        handlers=[handler],
        level=level,
    )
    logging.captureWarnings(True)
    return logfile
