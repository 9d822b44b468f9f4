from typing import Any

from protokit.core import define

Show = define("Show", {"show": None}, doc="Types with a display string.")


def show_value(value: Any) -> str:
    """``Show.show`` for conforming values, ``repr`` for anything else."""
    if Show.member(value):
        return Show.show(value)
    return repr(value)
