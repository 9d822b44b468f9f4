"""Standard protocols.

Importing this package defines every standard protocol in the root dispatch
context, whatever context happens to be active at import time.
"""

from protokit.core import get_root_context, push_context

with push_context(get_root_context()):
    from .applicative import Applicative
    from .bounded import Bounded
    from .case import DEFAULT, Case, select_case
    from .clone import Clone
    from .enumerable import Enumerable
    from .eq import Eq, equal
    from .foldable import Foldable
    from .functor import Functor
    from .logical import Logical
    from .monoid import Monoid
    from .numeric import Numeric
    from .ord import Ord
    from .semigroup import Semigroup
    from .sequential import Sequential
    from .show import Show, show_value

from .exceptions import BoundsError, ItemNotFoundError, MissingCaseError, ProtocolDomainError

__all__ = [
    "Applicative",
    "Bounded",
    "BoundsError",
    "Case",
    "Clone",
    "DEFAULT",
    "Enumerable",
    "Eq",
    "Foldable",
    "Functor",
    "ItemNotFoundError",
    "Logical",
    "MissingCaseError",
    "Monoid",
    "Numeric",
    "Ord",
    "ProtocolDomainError",
    "Semigroup",
    "Sequential",
    "Show",
    "equal",
    "select_case",
    "show_value",
]
