"""
Utility functions module.

Helpers for feeding pairs drawn from containers into a pair action.
"""

from .iteration import for_each_entry, for_each_indexed, zip_apply

__all__ = ["for_each_entry", "for_each_indexed", "zip_apply"]
