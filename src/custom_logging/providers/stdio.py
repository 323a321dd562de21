from pydantic import BaseModel
from typing import Any, Literal
import logging
import sys

from .abstract import LogProvider


class CustomStreamFormatter(logging.Formatter):
    # ANSI escape sequences
    RESET = "\033[0m"
    COLOR_MAP = {
        logging.DEBUG: "\033[90m",  # grey
        logging.INFO: "\033[0m",  # default color / no color
        logging.WARNING: "\033[33m",  # yellow
        logging.ERROR: "\033[31m",  # red
        logging.CRITICAL: "\033[1;31m",  # bold red
    }

    def format(self, record):
        color = self.COLOR_MAP.get(record.levelno, self.RESET)
        # temporarily modify levelname to include color
        original = record.levelname
        record.levelname = f"{color}{original}{self.RESET}"
        try:
            return super().format(record)
        finally:
            # restore it (so other handlers/formatters don't get the colored version)
            record.levelname = original


class StdioLogProviderConfig(BaseModel):
    stream: Literal["stdout", "stderr"] = "stderr"
    colors: bool = True


class StdioLogProvider(LogProvider):
    configModel = StdioLogProviderConfig

    @classmethod
    def initHandler(
        cls, loggingConfig: Any, loglevel: int | str = logging.INFO
    ) -> logging.Handler:
        config = cls.validateConfig(loggingConfig=loggingConfig)
        handler = logging.StreamHandler(
            sys.stdout if config.stream == "stdout" else sys.stderr
        )
        handler.setLevel(loglevel)
        fmt = "[%(levelname)s]: %(message)s"
        handler.setFormatter(
            CustomStreamFormatter(fmt) if config.colors else logging.Formatter(fmt)
        )
        return handler
