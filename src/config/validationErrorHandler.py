import sys
from typing import NoReturn
from pydantic import ValidationError

from .exit_code import ExitCode

def formatValidationError(e: ValidationError, additionalLocationInfo: str | None = None) -> list[str]:
  messages: list[str] = []
  for error in e.errors():
    location = ".".join([str(item) for item in error['loc']])
    match error['type']:
      case "missing":
        messages.append(f"Missing field(s) {location}" + (f" in {additionalLocationInfo}" if additionalLocationInfo else ""))
      case "int_parsing":
        messages.append(f"Malformed number value `{error['input']}` at {location}")
      case "bool_parsing":
        messages.append(f"Malformed boolean value `{error['input']}` at {location}")
      case "model_type":
        messages.append(f"Expected a mapping at {location or 'top level'}" + (f" in {additionalLocationInfo}" if additionalLocationInfo else ""))
      case _:
        messages.append(f"Unknown config validation error: {error['type']}; Message: {error['msg']}; Field: {location}")
  return messages

def handleValidationError(e: ValidationError, additionalLocationInfo: str | None = None) -> NoReturn:
  # note: using print as logger might not be configured yet
  for message in formatValidationError(e, additionalLocationInfo):
    print(message)
  sys.exit(ExitCode.CONFIG_FAILURE)
