"""Immutable result containers produced by the solver and highlight helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Tuple, Union

from mstage.types.base import INVALID_INPUT, Cost, NodeID


@dataclass(frozen=True)
class PathResult:
    """Outcome of one solve call.

    Attributes:
        cost: Minimum path cost, ``math.inf`` when the destination is
            unreachable, or the string ``"Invalid input"`` when the endpoints
            were rejected.
        path: Node ids walked from the source. Ends at the destination only
            when ``cost`` is finite.
    """

    cost: Union[Cost, str]
    path: Tuple[NodeID, ...] = ()

    @classmethod
    def invalid(cls) -> "PathResult":
        """Return the sentinel result for rejected endpoints."""
        return cls(cost=INVALID_INPUT, path=())

    @property
    def is_valid(self) -> bool:
        """True when ``cost`` is numeric (possibly infinite)."""
        return not isinstance(self.cost, str)

    @property
    def reachable(self) -> bool:
        """True when a finite-cost path to the destination was found."""
        return self.is_valid and math.isfinite(self.cost)  # type: ignore[arg-type]

    def format_path(self, separator: str = " → ") -> str:
        """Render the path for display, or ``"No path"`` if it is empty."""
        if not self.path:
            return "No path"
        return separator.join(str(node) for node in self.path)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-safe mapping; infinite costs become ``"Infinity"``."""
        cost: Any = self.cost
        if self.is_valid and not math.isfinite(cost):
            cost = "Infinity"
        return {"cost": cost, "path": list(self.path)}


@dataclass(frozen=True)
class EdgeView:
    """Edge as seen by a renderer: endpoints, weight and highlight flag."""

    source: NodeID
    target: NodeID
    weight: Cost
    highlighted: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.source,
            "target": self.target,
            "weight": self.weight,
            "highlighted": self.highlighted,
        }
