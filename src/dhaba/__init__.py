"""
Highway dhaba rating utilities: filter, sort and project listing records.
"""

from .operations import apply_operations, create_filter, create_mapper, create_sorter

__all__ = ["apply_operations", "create_filter", "create_mapper", "create_sorter"]
