#!/usr/bin/env python3
"""pytest fixtures"""

import contextlib
import os
import pathlib
import sys
import tempfile

import pytest
from PySide6.QtCore import (  # pylint: disable=import-error, no-name-in-module
    QCoreApplication,
    QSettings,
)

import mixboard.bootstrap
import mixboard.config
import mixboard.engine
import mixboard.state

# DO NOT CHANGE THIS TO BE com.github.mixboard
# otherwise your actual bits will disappear!
DOMAIN = "com.github.mixboard.testsuite"


def reboot_macosx_prefs():
    """work around Mac OS X's preference caching"""
    if sys.platform == "darwin":
        os.system(f"defaults delete {DOMAIN}")


@pytest.fixture
def bootstrap():
    """bootstrap a configuration"""
    with contextlib.suppress(PermissionError):  # Windows blows
        with tempfile.TemporaryDirectory(ignore_cleanup_errors=True) as newpath:
            mixboard.bootstrap.set_qt_names(domain=DOMAIN, appname="testsuite")
            config = mixboard.config.ConfigFile(
                logpath=pathlib.Path(newpath).joinpath("debug.log"), testmode=True
            )
            config.cparser.sync()
            yield config


#
# OS X has a lot of caching wrt preference files
# so we have do a lot of work to make sure they
# don't stick around
#
@pytest.fixture(autouse=True, scope="function")
def clear_old_testsuite():
    """clear out old testsuite configs"""
    if sys.platform == "win32":
        qsettingsformat = QSettings.IniFormat
    else:
        qsettingsformat = QSettings.NativeFormat

    mixboard.bootstrap.set_qt_names(domain=DOMAIN, appname="testsuite")
    config = QSettings(
        qsettingsformat,
        QSettings.UserScope,
        QCoreApplication.organizationName(),
        QCoreApplication.applicationName(),
    )
    config.clear()
    config.sync()
    filename = pathlib.Path(config.fileName())
    del config
    if filename.exists():
        filename.unlink()
    reboot_macosx_prefs()
    yield filename
    if filename.exists():
        filename.unlink()
    reboot_macosx_prefs()


@pytest.fixture
def tree():
    """an empty state tree"""
    return mixboard.state.StateTree()


@pytest.fixture
def engine():
    """a state engine that records everything it broadcasts"""
    stateengine = mixboard.engine.StateEngine()
    stateengine.events = []
    stateengine.subscribe(lambda event, payload: stateengine.events.append((event, payload)))
    return stateengine
