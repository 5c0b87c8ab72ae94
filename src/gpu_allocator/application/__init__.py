"""Application layer for the GPU allocator.

Orchestrates domain services to provide high-level functionality.
"""

from gpu_allocator.application.service import PreferredAllocationService

__all__ = [
    "PreferredAllocationService",
]
