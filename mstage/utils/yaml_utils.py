"""Utilities for handling YAML parsing quirks."""

from typing import Any, Dict, TypeVar

V = TypeVar("V")


def normalize_yaml_dict_keys(data: Dict[Any, V]) -> Dict[str, V]:
    """Return a copy of ``data`` whose keys are all lower-case strings.

    YAML 1.1 turns bare keys such as ``yes``/``on`` into booleans and numeric
    keys into ints. Problem files only use string keys, so every key is
    stringified and lower-cased, so boolean keys become ``"true"``/``"false"``.

    Examples:
        >>> normalize_yaml_dict_keys({"Nodes": 4, True: "x"})
        {'nodes': 4, 'true': 'x'}
    """
    normalized: Dict[str, V] = {}
    for key, value in data.items():
        normalized[str(key).strip().lower()] = value
    return normalized
