from .logger import Logger
from .provider_map import providerMap
