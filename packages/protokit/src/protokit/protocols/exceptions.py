"""Domain errors raised by protocol implementations (never by the dispatch core)."""

from protokit.exceptions import ProtokitError


class ProtocolDomainError(ProtokitError):
    pass


class ItemNotFoundError(ProtocolDomainError, LookupError):
    """Raised when a search over a sequence finds nothing."""


class BoundsError(ProtocolDomainError, ValueError):
    """Raised when stepping past the minimum or maximum of a bounded type."""


class MissingCaseError(ProtocolDomainError, LookupError):
    """Raised when a case match has neither a matching branch nor a default."""


__all__ = ["ProtocolDomainError", "ItemNotFoundError", "BoundsError", "MissingCaseError"]
