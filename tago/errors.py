"""Exception types raised while resolving and parsing description files."""


class TagoError(Exception):
    """Base class for all tago errors."""


class TargetNotFoundError(TagoError, FileNotFoundError):
    """Raised when the target path does not exist."""


class InvalidTargetError(TagoError):
    """Raised when the target is neither a regular file nor a directory."""


class DescriptionEncodingError(TagoError, ValueError):
    """Raised when a description file is not valid UTF-8 text."""


class ConfigError(TagoError, ValueError):
    """Raised when a configuration file does not fit the expected layout."""
