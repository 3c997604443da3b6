"""Location display exception definitions.

Errors raised outside the resolution core. Resolution itself never raises;
unresolvable identifiers end in the "Unknown Location" sentinel instead.
"""


class LocationDisplayError(Exception):
    """Base exception for location display operations."""

    pass


class ConfigError(LocationDisplayError):
    """The persisted configuration could not be read or validated.

    Attributes:
        path: Path of the offending config file, if known.
    """

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class TranslationFileError(LocationDisplayError):
    """A translation file is malformed.

    Attributes:
        path: Path of the offending translation file.
    """

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.path = path
