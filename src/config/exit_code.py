from enum import IntEnum


class ExitCode(IntEnum):
    """ Exit codes used by the PTR Generator """
    OK = 0
    PREFIX_FETCH_FAILURE = 1
    PREFIX_PARSE_FAILURE = 2
    ADDRESS_FETCH_FAILURE = 3
    ADDRESS_PARSE_FAILURE = 4
    RENDER_FAILURE = 5
    WRITE_FAILURE = 6
    CONFIG_FAILURE = 10
    HOOK_FAILURE = 100
