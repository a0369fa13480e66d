"""
Tree Configuration
==================

Defaults are read from the environment so the demo and tests can be resized
without code changes.
"""

import os

# Default tree shape
DEFAULT_BRANCHING_FACTOR = int(os.getenv('VERKLE_BRANCHING_FACTOR', 4))
DEFAULT_TREE_DEPTH = int(os.getenv('VERKLE_TREE_DEPTH', 3))


class Config:
    """Shape of a credential tree."""

    def __init__(self, branching_factor: int = None, depth: int = None):
        self.branching_factor = DEFAULT_BRANCHING_FACTOR if branching_factor is None else branching_factor
        self.depth = DEFAULT_TREE_DEPTH if depth is None else depth

        if self.branching_factor < 2:
            raise ValueError(f"branching_factor must be at least 2, got {self.branching_factor}")
        if self.depth < 2:
            raise ValueError(f"depth must be at least 2, got {self.depth}")

    @property
    def num_leaves(self) -> int:
        """Leaf slots committed by the root: k^(depth-1)."""
        return self.branching_factor ** (self.depth - 1)

    @property
    def max_degree(self) -> int:
        # One coefficient per slot
        return self.num_leaves - 1

    def __repr__(self):
        return (f"Config(branching_factor={self.branching_factor}, depth={self.depth}, "
                f"num_leaves={self.num_leaves})")


# Global config instance
config = Config()
