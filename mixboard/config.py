#!/usr/bin/env python3
"""
config file parsing/handling
"""

import contextlib
import logging
import pathlib
import sys

from PySide6.QtCore import (  # pylint: disable=no-name-in-module
    QCoreApplication,
    QSettings,
    QStandardPaths,
)

import mixboard
import mixboard.bootstrap

DEFAULT_REFRESH_INTERVAL = 500
DEFAULT_RAW_LOG_COUNT = 20


class ConfigFile:  # pylint: disable=too-many-instance-attributes
    """read and write to config.ini"""

    def __init__(
        self,
        logpath: str | pathlib.Path | None = None,
        reset: bool = False,
        testmode: bool = False,
    ):
        self.version: str = mixboard.__version__
        self.testmode: bool = testmode
        self.basedir: pathlib.Path = pathlib.Path(
            QStandardPaths.standardLocations(QStandardPaths.DocumentsLocation)[0],
            QCoreApplication.applicationName(),
        )
        self.logpath: pathlib.Path = self.basedir.joinpath("logs", mixboard.bootstrap.LOGNAME)
        if logpath:
            self.logpath = pathlib.Path(logpath)

        logging.info("Logpath: %s", self.logpath)

        self.qsettingsformat: QSettings.Format = QSettings.NativeFormat
        if sys.platform == "win32":
            self.qsettingsformat = QSettings.IniFormat

        self.cparser: QSettings = QSettings(
            self.qsettingsformat,
            QSettings.UserScope,
            QCoreApplication.organizationName(),
            QCoreApplication.applicationName(),
        )
        logging.info("configuration: %s", self.cparser.fileName())
        self.loglevel: str = "DEBUG"
        self.demo: bool = False
        self.refreshinterval: int = DEFAULT_REFRESH_INTERVAL
        self.rawlogcount: int = DEFAULT_RAW_LOG_COUNT

        self._force_set_statics()

        self.defaults()
        if reset:
            self.cparser.clear()
            self._force_set_statics()
            self.save()
        else:
            self.get()

    def _force_set_statics(self) -> None:
        """make sure these are always set"""
        if self.testmode:
            self.cparser.setValue("testmode/enabled", True)

    def reset(self) -> None:
        """forcibly go back to defaults"""
        logging.debug("config reset")
        self.__init__(logpath=self.logpath, reset=True, testmode=self.testmode)  # pylint: disable=unnecessary-dunder-call

    def get(self) -> None:
        """refresh values"""

        self.cparser.sync()
        with contextlib.suppress(TypeError):
            self.loglevel = self.cparser.value("settings/loglevel", defaultValue=self.loglevel)

        with contextlib.suppress(TypeError, ValueError):
            self.demo = self.cparser.value("mixboard/demo", type=bool, defaultValue=self.demo)

        with contextlib.suppress(TypeError, ValueError):
            self.refreshinterval = self.cparser.value(
                "mixboard/refreshinterval", type=int, defaultValue=self.refreshinterval
            )

        with contextlib.suppress(TypeError, ValueError):
            self.rawlogcount = self.cparser.value(
                "mixboard/rawlogcount", type=int, defaultValue=self.rawlogcount
            )

    def defaults(self) -> None:
        """default values for things"""
        logging.debug("set defaults")

        settings = QSettings(
            self.qsettingsformat,
            QSettings.SystemScope,
            QCoreApplication.organizationName(),
            QCoreApplication.applicationName(),
        )

        self._defaults_general_settings(settings)
        self._defaults_stagelinq(settings)

    def _defaults_general_settings(self, settings: QSettings) -> None:
        """default values for general settings"""
        settings.setValue("settings/loglevel", self.loglevel)

    @staticmethod
    def _defaults_stagelinq(settings: QSettings) -> None:
        """default values for the StagelinQ side"""
        settings.setValue("mixboard/demo", False)
        settings.setValue("mixboard/refreshinterval", DEFAULT_REFRESH_INTERVAL)
        settings.setValue("mixboard/rawlogcount", DEFAULT_RAW_LOG_COUNT)

    def put(self, loglevel: str, demo: bool) -> None:
        """Save the configuration file"""

        self.loglevel = loglevel
        self.demo = demo

        self.save()

    def save(self) -> None:
        """save the current set"""

        self.cparser.setValue("settings/loglevel", self.loglevel)
        self.cparser.setValue("mixboard/demo", self.demo)
        self.cparser.setValue("mixboard/refreshinterval", self.refreshinterval)
        self.cparser.setValue("mixboard/rawlogcount", self.rawlogcount)

        self.cparser.sync()

    def getrefreshinterval(self) -> float:
        """refresh interval in seconds"""
        return max(self.refreshinterval, 1) / 1000.0
