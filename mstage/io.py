"""YAML loader for problem files.

A problem file bundles the raw builder inputs with optional endpoints::

    nodes: 4
    edges: |
      1 2 1
      2 4 6
    stages: |
      1
      2
      4
    source: 1
    destination: 4

``edges`` and ``stages`` may also be YAML lists. They are flattened back to
the raw line format so the builder applies the same parsing rules to both.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from mstage.config import GraphBuildConfig
from mstage.graph.builder import MultistageGraph, build_graph
from mstage.utils.yaml_utils import normalize_yaml_dict_keys


@dataclass(frozen=True)
class Problem:
    """Raw inputs for one build-and-solve run."""

    nodes: Any
    edges: str = ""
    stages: str = ""
    source: Optional[Any] = None
    destination: Optional[Any] = None

    def build(self, config: Optional[GraphBuildConfig] = None) -> MultistageGraph:
        return build_graph(self.nodes, self.edges, self.stages, config)


def _as_lines(value: Any, section: str) -> str:
    """Flatten a YAML string or list section into newline-separated text."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    if not isinstance(value, list):
        raise ValueError(f"'{section}' must be a string or a list")

    lines = []
    for entry in value:
        if isinstance(entry, (list, tuple)):
            lines.append(" ".join(str(item) for item in entry))
        elif entry is None:
            lines.append("")
        else:
            lines.append(str(entry))
    return "\n".join(lines)


def problem_from_dict(data: Dict[str, Any]) -> Problem:
    """Create a Problem from an already-parsed mapping.

    Raises:
        ValueError: If the mapping has no ``nodes`` entry or a section has
            the wrong shape.
    """
    data = normalize_yaml_dict_keys(data)
    if "nodes" not in data:
        raise ValueError("Problem definition must include 'nodes'")

    return Problem(
        nodes=data["nodes"],
        edges=_as_lines(data.get("edges"), "edges"),
        stages=_as_lines(data.get("stages"), "stages"),
        source=data.get("source"),
        destination=data.get("destination"),
    )


def load_problem(yaml_str: str) -> Problem:
    """Parse a YAML problem definition.

    Raises:
        ValueError: If the document is not a mapping or is missing ``nodes``.
    """
    data = yaml.safe_load(yaml_str)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("The provided YAML must map to a dictionary at top-level.")
    return problem_from_dict(data)


def load_problem_file(path: Union[str, Path]) -> Problem:
    return load_problem(Path(path).read_text(encoding="utf-8"))
