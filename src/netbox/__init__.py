from .api_pydantic_models import NetboxIPAddress, NetboxPaginated, NetboxPrefix, NetboxPrefixCustomFields
from .client import NetboxClient
from .errors import (
    AddressFetchError,
    AddressParseError,
    FatalRetrievalError,
    PrefixFetchError,
    PrefixParseError,
)
