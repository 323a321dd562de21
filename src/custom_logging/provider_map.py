from typing import Type
from .providers import DiscordLogProvider, FileLogProvider, LogProvider, StdioLogProvider

providerMap: dict[str, Type[LogProvider]] = {
    "DISCORD": DiscordLogProvider,
    "FILE": FileLogProvider,
    "STDIO": StdioLogProvider,
}
