"""Shortest path strategies."""

from .bellman_ford import BellmanFordFinder
from .dijkstra import DijkstraFinder

__all__ = ["BellmanFordFinder", "DijkstraFinder"]
