"""Domain entities for the GPU allocator.

Entities represent the inputs the allocation engine reads:
- Device / DeviceSet: the allocatable device inventory snapshot
- DeviceGraph: the GPU interconnect layout used by aligned allocation
"""

from gpu_allocator.domain.entities.device import (
    Device,
    DeviceSet,
)
from gpu_allocator.domain.entities.topology import (
    AlignedDevice,
    DeviceGraph,
    NVLink,
)

__all__ = [
    # Inventory
    "Device",
    "DeviceSet",
    # Topology
    "AlignedDevice",
    "DeviceGraph",
    "NVLink",
]
