from pydantic import BaseModel
from typing import Any
import logging

from .abstract import LogProvider


class FileLogProviderConfig(BaseModel):
    path: str
    mode: str = "a"


class FileLogProvider(LogProvider):
    configModel = FileLogProviderConfig

    @classmethod
    def initHandler(
        cls, loggingConfig: Any, loglevel: int | str = logging.INFO
    ) -> logging.Handler:
        config = cls.validateConfig(loggingConfig=loggingConfig)
        handler = logging.FileHandler(config.path, mode=config.mode, encoding="utf-8")
        handler.setLevel(loglevel)
        handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s]: %(message)s")
        )
        return handler
