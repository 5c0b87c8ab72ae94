"""Domain services for GPU allocation.

Services implement the allocation algorithms:
- AlignedAllocator: topology-aware selection of unshared GPUs
- PackedAllocator: fill one GPU's replicas before the next
- DistributedAllocator: spread replicas evenly across GPUs
- AllocationPolicySelector: picks the algorithm for a request
"""

from gpu_allocator.domain.services.aligned import AlignedAllocator
from gpu_allocator.domain.services.distributed import (
    DistributedAllocator,
    ReplicaCount,
    build_replica_accounting,
)
from gpu_allocator.domain.services.packed import PackedAllocator
from gpu_allocator.domain.services.policy import AllocationPolicySelector

__all__ = [
    "AlignedAllocator",
    "AllocationPolicySelector",
    "DistributedAllocator",
    "PackedAllocator",
    "ReplicaCount",
    "build_replica_accounting",
]
