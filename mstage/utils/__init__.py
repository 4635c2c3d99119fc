"""Utility helpers used across MStage.

This package contains small, self-contained utilities that do not depend on
project internals.
"""

from mstage.utils.numbers import as_node_id, parse_number
from mstage.utils.output_paths import ensure_parent_dir, results_path_for_problem
from mstage.utils.yaml_utils import normalize_yaml_dict_keys

__all__ = [
    "parse_number",
    "as_node_id",
    "ensure_parent_dir",
    "results_path_for_problem",
    "normalize_yaml_dict_keys",
]
