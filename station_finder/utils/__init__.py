"""Utility helpers."""

from .resource_loader import get_resource_path, load_amenity_table, load_yaml_resource
from .text import contains_folded, fold_text

__all__ = [
    "get_resource_path",
    "load_yaml_resource",
    "load_amenity_table",
    "fold_text",
    "contains_folded",
]
