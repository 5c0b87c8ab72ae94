"""Outbound adapters - implementations of outbound ports."""

from gpu_allocator.adapters.outbound.best_effort import BestEffortPolicy

__all__ = [
    "BestEffortPolicy",
]
