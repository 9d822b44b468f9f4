"""Protocol registrations for built-in and library types.

Importing this package registers everything in the root dispatch context.
"""

from protokit.core import get_root_context, push_context

with push_context(get_root_context()):
    from . import builtin, maybe, ordering

__all__ = ["builtin", "maybe", "ordering"]
