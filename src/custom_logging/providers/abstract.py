from abc import ABC, abstractmethod
from pydantic import BaseModel
from typing import Any, ClassVar, Type
import logging


class LogProvider(ABC):
    # provider specific settings, validated from `provider_config`
    configModel: ClassVar[Type[BaseModel]]

    @classmethod
    @abstractmethod
    def initHandler(
        cls, loggingConfig: Any, loglevel: int | str = logging.INFO
    ) -> logging.Handler:
        pass

    @classmethod
    def validateConfig(cls, loggingConfig: Any) -> Any:
        return cls.configModel.model_validate(loggingConfig or {})
