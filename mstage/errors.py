"""Exceptions raised at the MStage operation boundaries."""

from __future__ import annotations

from typing import Any


class InvalidNodeCount(ValueError):
    """Raised when a node count is non-numeric or below the configured minimum."""

    def __init__(self, value: Any, min_nodes: int) -> None:
        self.value = value
        self.min_nodes = min_nodes
        super().__init__(
            f"Please enter a valid number of nodes (>= {min_nodes}), got {value!r}"
        )


class InvalidEndpoint(ValueError):
    """Raised when a source or destination is non-numeric or outside ``[0, N]``."""

    def __init__(self, role: str, value: Any, max_node: int) -> None:
        self.role = role
        self.value = value
        self.max_node = max_node
        super().__init__(
            f"Invalid {role} node {value!r}: expected an integer in [0, {max_node}]"
        )
