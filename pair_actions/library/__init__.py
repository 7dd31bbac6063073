"""Ready-made pair actions for common two-value side effects."""

from .basic import concat, print_pair, safe_divide
from .containers import put_entry, replace_at
from .files import copy_file

__all__ = [
    "concat",
    "copy_file",
    "print_pair",
    "put_entry",
    "replace_at",
    "safe_divide",
]
