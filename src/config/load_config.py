import yaml
import re
import sys
from os import getenv
from pydantic import ValidationError

from .config_models import Config
from .exit_code import ExitCode
from .validationErrorHandler import handleValidationError

var_substition_regex = re.compile(r"{{(.*?)}}")

def var_substition(content: str) -> str:
  for match in var_substition_regex.finditer(content):
    # replace {{PTR_GENERATOR_VAR_x}} with $PTR_GENERATOR_VAR_x
    name = match.group(1).strip()
    if name.startswith("PTR_GENERATOR_VAR_"):
      content = content.replace(match.group(0), getenv(name) or "", 1)
  return content


def load_config(config_location: str) -> Config:
  with open(config_location, "r", encoding="utf-8") as config_file:
    config_str: str = config_file.read()

  config_str = var_substition(config_str)

  try:
    config_json = yaml.safe_load(config_str)
  except yaml.YAMLError as e:
    # note: using print as logger might not be configured yet
    print(f"Config file {config_location} is not valid YAML: {e}")
    sys.exit(ExitCode.CONFIG_FAILURE)

  try:
    config: Config = Config.model_validate(config_json)
  except ValidationError as e:
    handleValidationError(e, "application config")

  return config
