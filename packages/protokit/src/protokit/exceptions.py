# protokit/exceptions.py
"""Root of the protokit exception hierarchy."""


class ProtokitError(Exception):
    """Base class for every error raised by protokit itself."""


class ConfigurationError(ProtokitError):
    """Raised when protokit settings are malformed."""


__all__ = ["ProtokitError", "ConfigurationError"]
