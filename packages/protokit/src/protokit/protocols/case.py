from typing import Any, Iterable, Mapping

from protokit.core import allocate, define

from .exceptions import MissingCaseError

# Key selecting the fallback branch of a ``Case.case`` mapping.
DEFAULT = allocate("default", owner="Case")

Case = define("Case", {"case": None}, doc="Pattern matching over a value's cases.")


def select_case(value: Any, keys: Iterable[Any], cases: Mapping[Any, Any]) -> Any:
    """Pick the first branch of ``cases`` matching one of ``keys``, else the DEFAULT branch.

    Callable branches are called with ``value``; other branches are returned as is.
    """
    for key in keys:
        if key in cases:
            match = cases[key]
            break
    else:
        if DEFAULT not in cases:
            raise MissingCaseError(f"Missing case for {value!r} when matching {type(value).__name__} value")
        match = cases[DEFAULT]
    return match(value) if callable(match) else match
