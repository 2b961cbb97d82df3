"""
Utility functions for path finding operations.
"""

import gc
import logging
import os
import time
from heapq import heapify, heappop, heappush
from typing import Dict, Hashable, List, Optional, Set, Tuple

import psutil

from ..exceptions import GraphOperationError
from ..graph import WeightedGraph
from ..models import Edge, NodeState
from .models import PathResult

logger = logging.getLogger(__name__)

# Constants
MAX_QUEUE_SIZE = 100000  # Heap size above which stale entries are compacted


def is_better_cost(new_cost: float, old_cost: float, tolerance: float = 0.0) -> bool:
    """Compare costs, optionally requiring a minimum improvement.

    Returns True if new_cost is lower than old_cost by more than ``tolerance``.
    The default is a strict comparison, so any cheaper cost wins however
    small the saving. Any finite cost is better than ``inf``.
    """
    assert isinstance(new_cost, float) and isinstance(old_cost, float), "Costs must be floats"
    return new_cost < old_cost - tolerance


def reconstruct_path(predecessors: Dict[Hashable, Hashable], destination: Hashable) -> List[Hashable]:
    """Follow predecessor links back from ``destination`` and return the path in order.

    Raises:
        GraphOperationError: If the predecessor links form a cycle
    """
    path = [destination]
    current = destination
    while current in predecessors:
        current = predecessors[current]
        path.append(current)
        if len(path) > len(predecessors) + 1:
            raise GraphOperationError(f"Predecessor cycle detected at node {current}")
    path.reverse()
    return path


def calculate_path_cost(nodes: List[Hashable], graph: WeightedGraph) -> float:
    """Sum the edge weights along a node sequence.

    Raises:
        GraphOperationError: If two consecutive nodes are not connected
    """
    total = 0.0
    for first, second in zip(nodes, nodes[1:]):
        weight = graph.get_edge_weight(first, second)
        if weight is None:
            raise GraphOperationError(f"No edge between {first} and {second}")
        total += weight
    return total


def create_path_result(nodes: List[Hashable], total_cost: float, graph: WeightedGraph) -> PathResult:
    """Create PathResult from a node sequence, attaching the traversed edges."""
    edges = [
        Edge(first, second, graph.get_edge_weight(first, second))
        for first, second in zip(nodes, nodes[1:])
    ]
    return PathResult(nodes=nodes, total_cost=total_cost, edges=edges)


class SearchArena:
    """
    Scratch state owned by a single search.

    States are copied lazily from the graph's templates on first access and
    discarded together with the arena, so nothing a search writes is visible
    to the graph or to other searches.
    """

    __slots__ = ("graph", "states", "closed", "predecessors")

    def __init__(self, graph: WeightedGraph):
        self.graph = graph
        self.states: Dict[Hashable, NodeState] = {}
        self.closed: Set[Hashable] = set()
        self.predecessors: Dict[Hashable, Hashable] = {}

    def state(self, node_id: Hashable) -> NodeState:
        """Get this search's state for a node, creating it unreached if needed."""
        state = self.states.get(node_id)
        if state is None:
            state = self.graph.state_of(node_id).fresh()
            self.states[node_id] = state
        return state

    def close(self, node_id: Hashable) -> None:
        """Finalize a node's cost."""
        self.state(node_id).close()
        self.closed.add(node_id)

    def is_closed(self, node_id: Hashable) -> bool:
        return node_id in self.closed


class PriorityQueue:
    """Priority queue with decrease-key, FIFO among equal priorities.

    Each item has at most one live entry, found through ``_entry_finder``;
    superseded heap entries are skipped on pop.
    """

    def __init__(self, maxsize: int = MAX_QUEUE_SIZE):
        self._queue: List[Tuple[float, int, Hashable]] = []
        self._entry_finder: Dict[Hashable, Tuple[float, int]] = {}
        self._counter = 0  # Unique counter to break ties
        self._maxsize = maxsize
        self.peak = 0

    def add_or_update(self, item: Hashable, priority: float) -> bool:
        """Insert ``item`` or lower its priority.

        Returns:
            True if the queue changed, False if the existing priority was as good
        """
        if item in self._entry_finder:
            old_priority, _ = self._entry_finder[item]
            # Only update if new priority is lower (better)
            if not is_better_cost(priority, old_priority):
                return False

        entry = (priority, self._counter, item)
        self._entry_finder[item] = (priority, self._counter)
        heappush(self._queue, entry)
        self._counter += 1
        self.peak = max(self.peak, len(self._entry_finder))

        if len(self._queue) > self._maxsize and len(self._queue) > 2 * len(self._entry_finder):
            self._compact()
        return True

    def pop(self) -> Optional[Tuple[float, Hashable]]:
        """Remove and return the item with the lowest priority."""
        while self._queue:
            priority, count, item = heappop(self._queue)
            if self._entry_finder.get(item) == (priority, count):
                del self._entry_finder[item]
                return (priority, item)
        return None

    def _compact(self) -> None:
        """Drop superseded entries from the heap."""
        before = len(self._queue)
        self._queue = [
            (priority, count, item) for item, (priority, count) in self._entry_finder.items()
        ]
        heapify(self._queue)
        logger.debug(f"Compacted frontier from {before} to {len(self._queue)} entries")

    def empty(self) -> bool:
        """Return True if the queue is empty."""
        return len(self._entry_finder) == 0

    def __contains__(self, item: Hashable) -> bool:
        return item in self._entry_finder

    def __len__(self) -> int:
        """Return the number of valid items in the queue."""
        return len(self._entry_finder)


class MemoryManager:
    """Memory sampling hook for searches."""

    def __init__(self, max_memory_mb: Optional[float] = None, check_interval: float = 0.1):
        """Initialize memory manager.

        Args:
            max_memory_mb: Growth above the starting RSS that raises MemoryError
            check_interval: Minimum seconds between samples
        """
        self.max_memory = max_memory_mb * 1024 * 1024 if max_memory_mb else None
        self.start_memory = get_memory_usage()
        self._peak_memory = self.start_memory
        self._last_check = 0.0
        self._check_interval = check_interval

    def check_memory(self) -> None:
        """Sample memory usage and enforce the limit."""
        current_time = time.time()
        if current_time - self._last_check < self._check_interval:
            return

        self._last_check = current_time
        current = get_memory_usage()
        self._peak_memory = max(self._peak_memory, current)

        if self.max_memory and current - self.start_memory > self.max_memory:
            # Try to reclaim memory
            gc.collect()
            current = get_memory_usage()

            if current - self.start_memory > self.max_memory:
                raise MemoryError(
                    f"Memory usage {current/1024/1024:.1f}MB exceeds "
                    f"limit of {self.max_memory/1024/1024:.1f}MB"
                )

    @property
    def peak_memory(self) -> int:
        """Peak sampled memory usage in bytes."""
        return self._peak_memory

    @property
    def peak_memory_mb(self) -> float:
        """Get peak memory usage in MB."""
        return self._peak_memory / 1024 / 1024

    def reset_peak_memory(self) -> None:
        """Reset peak memory tracking."""
        self._peak_memory = get_memory_usage()
        self.start_memory = self._peak_memory
        self._last_check = 0.0


def get_memory_usage() -> int:
    """Get current memory usage in bytes."""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss
