"""
Best-first shortest path search.

The search orders its frontier by ``f = g + h`` where ``h`` comes from a
pluggable heuristic function. With the default inert heuristic it is
Dijkstra's algorithm.
"""

import logging
from contextlib import contextmanager
from time import time
from typing import Any, Hashable, Optional

from ...graph import WeightedGraph
from ...models import NodeState, validate_heuristic_value
from ..base import PathFinder
from ..models import PathResult, PerformanceMetrics
from ..types import HeuristicFunc, inert_heuristic
from ..utils import (
    MAX_QUEUE_SIZE,
    MemoryManager,
    PriorityQueue,
    SearchArena,
    create_path_result,
    is_better_cost,
    reconstruct_path,
)

logger = logging.getLogger(__name__)


class ShortestPathFinder(PathFinder[PathResult]):
    """Best-first (A*-shaped) shortest path search over a ``WeightedGraph``.

    Every call to ``find_path`` works on its own ``SearchArena``, so a finder
    or a graph can serve any number of sequential or concurrent searches.
    ``last_metrics`` holds the metrics of the most recent call made through
    this finder.
    """

    def __init__(
        self,
        graph: WeightedGraph,
        heuristic: Optional[HeuristicFunc] = None,
        memory_manager: Optional[MemoryManager] = None,
        max_queue_size: int = MAX_QUEUE_SIZE,
    ):
        """Initialize finder.

        Args:
            graph: Graph to search
            heuristic: Default remaining-cost estimator, inert when omitted
            memory_manager: Optional memory sampling hook called once per expansion
            max_queue_size: Frontier heap size above which stale entries are compacted
        """
        super().__init__(graph)
        self.heuristic = heuristic or inert_heuristic
        self.memory_manager = memory_manager
        self.max_queue_size = max_queue_size
        self.last_metrics: Optional[PerformanceMetrics] = None

    @contextmanager
    def _search_context(self, metrics: PerformanceMetrics):
        """Context manager closing out metrics for a search."""
        if self.memory_manager:
            self.memory_manager.reset_peak_memory()
        try:
            yield
        finally:
            metrics.end_time = time()
            if self.memory_manager:
                metrics.max_memory_used = self.memory_manager.peak_memory
            self.last_metrics = metrics

    def find_path(
        self,
        start_node: Hashable,
        end_node: Hashable,
        heuristic: Optional[HeuristicFunc] = None,
        validate: bool = False,
        **kwargs: Any,
    ) -> Optional[PathResult]:
        """Find the cheapest path from ``start_node`` to ``end_node``.

        Args:
            start_node: Source node identifier
            end_node: Destination node identifier
            heuristic: Estimator overriding the finder's default for this call
            validate: Check the result against the graph before returning it

        Returns:
            PathResult, or None if ``end_node`` is unreachable

        Raises:
            UnknownNodeError: If either node is not registered
            InvalidHeuristicError: If the heuristic returns an unusable estimate
        """
        metrics = PerformanceMetrics(operation="best_first_search", start_time=time())

        with self._search_context(metrics):
            self.validate_nodes(start_node, end_node)
            result = self._search(start_node, end_node, heuristic or self.heuristic, metrics)
            if result is not None:
                metrics.path_length = result.length
                if validate:
                    result.validate(self.graph)
            return result

    def _search(
        self,
        start_node: Hashable,
        end_node: Hashable,
        heuristic: HeuristicFunc,
        metrics: PerformanceMetrics,
    ) -> Optional[PathResult]:
        logger.debug(f"Starting best-first search from {start_node} to {end_node}")

        def estimate(state: NodeState) -> float:
            return validate_heuristic_value(str(state.node_id), heuristic(state, end_node))

        arena = SearchArena(self.graph)
        pq = PriorityQueue(maxsize=self.max_queue_size)

        source = arena.state(start_node)
        source.relax(0.0, estimate(source))
        pq.add_or_update(start_node, source.f)

        nodes_explored = 0
        try:
            while not pq.empty():
                if self.memory_manager:
                    self.memory_manager.check_memory()

                current = pq.pop()
                if current is None:
                    break

                current_f, current_node = current
                current_state = arena.state(current_node)
                nodes_explored += 1
                logger.debug(f"Visiting node {current_node} with g={current_state.g} f={current_f}")

                if current_node == end_node:
                    nodes = reconstruct_path(arena.predecessors, end_node)
                    logger.debug(f"Found path {nodes} with cost {current_state.g}")
                    return create_path_result(nodes, current_state.g, self.graph)

                arena.close(current_node)

                for neighbor, weight in self.graph.edges_from(current_node).items():
                    if arena.is_closed(neighbor):
                        continue

                    neighbor_state = arena.state(neighbor)
                    tentative_g = current_state.g + weight

                    if is_better_cost(tentative_g, neighbor_state.g):
                        logger.debug(
                            f"  Relaxing {neighbor}: {neighbor_state.g} -> {tentative_g}"
                        )
                        neighbor_state.relax(tentative_g, estimate(neighbor_state))
                        arena.predecessors[neighbor] = current_node
                        pq.add_or_update(neighbor, neighbor_state.f)
        finally:
            metrics.nodes_explored = nodes_explored
            metrics.frontier_peak = pq.peak

        logger.debug(f"No path exists between {start_node} and {end_node}")
        return None
