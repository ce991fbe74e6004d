"""
Exporter package.

Re-exports the JSON export entry points used by the CLI.
"""

from __future__ import annotations

from .json_exporter import build_tree_dict, export_tree_json, serialize_tree_to_json_string

__all__ = ["build_tree_dict", "export_tree_json", "serialize_tree_to_json_string"]
