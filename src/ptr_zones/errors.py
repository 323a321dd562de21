class SkippableInputError(ValueError):
    """A single prefix cannot be processed, the run continues without it."""

    def __init__(self, cidr: str, reason: str):
        super().__init__(f"Skipping prefix {cidr}: {reason}")
        self.cidr = cidr
        self.reason = reason


class MissingPTRMetadataError(SkippableInputError):
    # most prefixes in an inventory are not meant to get PTR records at all
    pass
