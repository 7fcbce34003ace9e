"""
Module graph: dependency discovery and ordering.
"""

from bundler.graph.closure import ClosureBuilder, DependencyResolver
from bundler.graph.packer import TopologicalPacker

__all__ = [
    "ClosureBuilder",
    "DependencyResolver",
    "TopologicalPacker",
]
