from pydantic import BaseModel, Field, field_validator
from typing import Any

class LoggingConfig(BaseModel):
  provider: str
  loglevel: str
  provider_config: Any | None = None

class GlobalConfig(BaseModel):
  ptr_domain: str
  out_directory: str = "/etc/bind/zones"
  template_directory: str = "/etc/ptr_generator/templates"
  serial_revision: int = Field(1, ge=0, le=99) # two-digit suffix of the YYYYMMDDnn serial
  reload_command: str | None = None # run after all zones are written, e.g. `rndc reload`
  dry_run: bool = Field(False, alias="dry-run") # no dry run by default
  disable_v4: bool = Field(False, alias="disable-ipv4") # enable ipv4 by default
  disable_v6: bool = Field(False, alias="disable-ipv6") # enable ipv6 by default
  python_root_logger: bool = False
  logging: list[LoggingConfig] = [LoggingConfig(provider="stdio", loglevel="info")]

  @field_validator("ptr_domain")
  @classmethod
  def strip_ptr_domain(cls, value: str) -> str:
      value = value.strip().strip(".")
      if not value:
          raise ValueError("`ptr_domain` must not be empty")
      return value

class NetboxConfig(BaseModel):
  api_uri: str
  api_key: str
  ignore_tls_verification: bool = False
  timeout: int = 10 # seconds, per request
  page_size: int | None = None # sent as `limit`, NetBox default otherwise

  @field_validator("api_uri")
  @classmethod
  def strip_trailing_slash(cls, value: str) -> str:
      return value.rstrip("/")

class Config(BaseModel):
  global_: GlobalConfig = Field(..., alias='global')
  netbox: NetboxConfig
