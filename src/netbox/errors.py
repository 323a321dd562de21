from config import ExitCode


class FatalRetrievalError(Exception):
    """The inventory could not be read, the run has to be aborted."""

    exit_code: ExitCode = ExitCode.PREFIX_FETCH_FAILURE

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message)
        self.url = url


class PrefixFetchError(FatalRetrievalError):
    exit_code = ExitCode.PREFIX_FETCH_FAILURE


class PrefixParseError(FatalRetrievalError):
    exit_code = ExitCode.PREFIX_PARSE_FAILURE


class AddressFetchError(FatalRetrievalError):
    exit_code = ExitCode.ADDRESS_FETCH_FAILURE


class AddressParseError(FatalRetrievalError):
    exit_code = ExitCode.ADDRESS_PARSE_FAILURE
