"""Testing utilities for fsgraphlib consumers."""

from .fixtures import build_tree, tree_listing

__all__ = ['build_tree', 'tree_listing']
