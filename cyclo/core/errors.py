"""Exception types raised while building the complexity dataset."""


class CycloError(Exception):
    """Base class for all cyclo errors."""


class BadFileExtension(CycloError):
    """A file could not be mapped to a supported grammar or line counter."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"The file '{path}' has a bad extension and could not be parsed")


class RecordSetMismatch(CycloError):
    """The projected treemap sequences disagree in length."""

    def __init__(self, lengths: dict):
        self.lengths = dict(lengths)
        detail = ", ".join(f"{name}={size}" for name, size in self.lengths.items())
        super().__init__(f"Treemap sequences must have equal length ({detail})")


class ConfigError(CycloError):
    """A configuration file is missing or malformed."""
