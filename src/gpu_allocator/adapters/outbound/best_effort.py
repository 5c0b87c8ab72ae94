"""Best-effort topology allocation policy.

Default TopologyAllocator for aligned allocation. Prefers sets of GPUs that
share NVLinks and NUMA nodes, growing the selection greedily from the
required devices (or from every possible seed when nothing is required).

References:
    - DESIGN.md (Open question decisions, item 5)
"""

from __future__ import annotations

from gpu_allocator.domain.entities.topology import AlignedDevice, DeviceGraph


class BestEffortPolicy:
    """Greedy topology-aware allocation over a device graph."""

    def __init__(self, graph: DeviceGraph) -> None:
        """Initialize the policy.

        Args:
            graph: Topology used to score device pairs.
        """
        self._graph = graph

    def allocate(
        self,
        available: list[AlignedDevice],
        required: list[AlignedDevice],
        size: int,
    ) -> list[AlignedDevice]:
        """Select ``size`` well-connected devices including ``required``.

        Returns an empty list when the request cannot be satisfied. Repeated
        devices count once.
        """
        available = list(dict.fromkeys(available))
        required = list(dict.fromkeys(required))

        if size <= 0 or len(available) < size or len(required) > size:
            return []
        if any(d not in available for d in required):
            return []

        candidates = [d for d in available if d not in required]
        if required:
            return self._grow(list(required), candidates, size)

        best: list[AlignedDevice] = []
        best_score = -1
        for seed in candidates:
            selection = self._grow([seed], [c for c in candidates if c != seed], size)
            score = self._total_score(selection)
            if score > best_score:
                best, best_score = selection, score
        return best

    def _grow(
        self,
        selection: list[AlignedDevice],
        candidates: list[AlignedDevice],
        size: int,
    ) -> list[AlignedDevice]:
        """Add the best-connected candidate until the selection is full."""
        remaining = list(candidates)
        while len(selection) < size:
            best = remaining[0]
            best_score = self._score_against(best, selection)
            for candidate in remaining[1:]:
                score = self._score_against(candidate, selection)
                if score > best_score:
                    best, best_score = candidate, score
            selection.append(best)
            remaining.remove(best)
        return selection

    def _score_against(self, candidate: AlignedDevice, selection: list[AlignedDevice]) -> int:
        return sum(self._graph.link_score(candidate, s) for s in selection)

    def _total_score(self, selection: list[AlignedDevice]) -> int:
        return sum(
            self._graph.link_score(a, b)
            for i, a in enumerate(selection)
            for b in selection[i + 1:]
        )
