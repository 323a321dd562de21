import logging
import sys
from pydantic import ValidationError

from config import ExitCode, GlobalConfig, LoggingConfig, handleValidationError

from .provider_map import providerMap


class Logger(object):

    @classmethod
    def initLoggerHandlers(cls, config: GlobalConfig) -> logging.Logger:
        logger: logging.Logger
        if config.python_root_logger:
            logger = logging.getLogger()
        else:
            logger = cls.getPTRGeneratorLogger()
        logger.setLevel(
            logging.DEBUG
        )  # listen to all messages, let the handlers decide what to emit
        for loggerConfig in config.logging:
            handler = cls.createHandler(loggerConfig)
            if handler is not None:
                logger.addHandler(handler)
        return logger

    @staticmethod
    def createHandler(loggerConfig: LoggingConfig) -> logging.Handler | None:
        # note: using print as the logger is not configured yet
        provider = providerMap.get(loggerConfig.provider.upper())
        if provider is None:
            print(f"Skipping unknown log provider '{loggerConfig.provider}' in config")
            return None
        try:
            return provider.initHandler(
                loggingConfig=loggerConfig.provider_config,
                loglevel=loggerConfig.loglevel.upper(),
            )
        except ValidationError as e:
            handleValidationError(e, f"{loggerConfig.provider} logprovider config")
        except ValueError:
            print(f"Unknown loglevel '{loggerConfig.loglevel}' for log provider '{loggerConfig.provider}'")
            sys.exit(ExitCode.CONFIG_FAILURE)
        except OSError as e:
            print(f"Unable to open output of log provider '{loggerConfig.provider}': {e}")
            sys.exit(ExitCode.CONFIG_FAILURE)

    @staticmethod
    def getPTRGeneratorLogger() -> logging.Logger:
        return logging.getLogger("PTR Generator")
