"""Testing utilities for treeiter consumers."""

from .fixtures import RecordingAdapter, build_forest, build_tree, values

__all__ = ['RecordingAdapter', 'build_forest', 'build_tree', 'values']
