"""Custom exception hierarchy for molfile parsing and SDF splitting."""


class MolfileError(Exception):
    """Base exception for all molfile errors.

    All molfile-specific exceptions inherit from this class, enabling
    callers to catch every parse or split failure with a single handler.
    """

    pass


class UnsupportedVersionError(MolfileError):
    """Exception raised when a count line declares a non-V2000 CTfile.

    This is the only fatal parse error. Every other irregularity in a
    record degrades to a best-effort structured result.

    Attributes:
        version: The six-character version field found on the count line
    """

    def __init__(self, version: str) -> None:
        """Initialize UnsupportedVersionError with the offending version.

        Args:
            version: Raw version field sliced from the count line
        """
        self.version = version
        super().__init__(f"Unsupported molfile version '{version}'")


class SplitterStateError(MolfileError):
    """Exception raised when a splitter is used outside its lifecycle."""

    def __init__(self, message: str) -> None:
        """Create a lifecycle error for a record splitter."""
        self.message = message
        super().__init__(message)


class ConfigError(MolfileError):
    """Exception raised for configuration errors.

    Raised when splitter settings from keywords or the environment cannot be
    validated.

    Attributes:
        field: The configuration field that caused the error
        message: Human-readable error message describing the issue
    """

    def __init__(self, field: str, message: str) -> None:
        """Initialize ConfigError with field and message.

        Args:
            field: Configuration field name where error occurred
            message: Descriptive error message
        """
        self.field = field
        self.message = message
        super().__init__(f"Configuration error in '{field}': {message}")
