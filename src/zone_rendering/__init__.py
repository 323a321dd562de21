from .errors import HookError, RenderError, ZoneWriteError
from .output import runReloadCommand, writeZoneFile, zoneFileName
from .renderer import formatSerial, renderPTRLines, renderZone
from .templates import DEFAULT_TEMPLATE_NAME, TemplateResolver
