from .abstract import LogProvider
from .discord import DiscordLogProvider
from .file import FileLogProvider
from .stdio import StdioLogProvider
