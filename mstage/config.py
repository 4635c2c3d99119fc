"""Configuration classes for MStage components."""

from dataclasses import dataclass


@dataclass
class GraphBuildConfig:
    """Configuration for parsing raw graph descriptions."""

    # Smallest node count accepted by the builder
    min_nodes: int = 2

    # Node id 0 is rejected as an edge endpoint unless enabled
    allow_zero_node: bool = False

    # Log dropped edge lines at WARNING instead of DEBUG
    warn_on_skipped_edges: bool = True

    # Separator used when rendering a path as text
    path_separator: str = " → "

    def is_valid_endpoint(self, node_id: int, num_nodes: int) -> bool:
        """Return True if ``node_id`` may appear as an edge endpoint."""
        lower = 0 if self.allow_zero_node else 1
        return lower <= node_id <= num_nodes


# Global configuration instance
BUILD_CONFIG = GraphBuildConfig()
