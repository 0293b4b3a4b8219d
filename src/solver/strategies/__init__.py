"""
Strategies Package - Concrete strategy implementations.

Import this module to register all built-in strategies.
"""

from .branch_and_bound import BranchAndBoundStrategy, SearchState
from .greedy import GreedyStrategy

__all__ = [
    "BranchAndBoundStrategy",
    "GreedyStrategy",
    "SearchState",
]
