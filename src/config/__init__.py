from .config_models import Config, GlobalConfig, LoggingConfig, NetboxConfig
from .exit_code import ExitCode
from .load_config import load_config, var_substition
from .validationErrorHandler import formatValidationError, handleValidationError
