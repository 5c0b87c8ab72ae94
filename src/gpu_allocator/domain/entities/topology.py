"""Device graph consumed by the topology-aware allocator.

The graph models the node's physical GPUs as seen by an aligned allocator:
each GPU's NUMA affinity and the NVLink connections between GPUs. Plain
string IDs are resolved against it before an aligned allocation runs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from gpu_allocator.domain.value_objects.device_identifiers import DeviceId


@dataclass(frozen=True)
class AlignedDevice:
    """A physical GPU as the topology allocator sees it."""
    uuid: DeviceId
    index: int
    numa_node: Optional[int] = None   # None when the affinity is unknown


@dataclass(frozen=True)
class NVLink:
    """NVLink connection between two GPUs."""
    gpu_a: DeviceId
    gpu_b: DeviceId
    links: int = 1                    # Number of NVLink lanes between the pair


@dataclass
class DeviceGraph:
    """Node-wide GPU interconnect topology."""
    devices: dict[DeviceId, AlignedDevice]  # Map uuid -> AlignedDevice
    nvlinks: list[NVLink] = field(default_factory=list)

    @classmethod
    def from_devices(cls, devices: Iterable[AlignedDevice], nvlinks: Iterable[NVLink] = ()) -> DeviceGraph:
        """Build a graph from a device list."""
        return cls(devices={d.uuid: d for d in devices}, nvlinks=list(nvlinks))

    @property
    def device_count(self) -> int:
        """Number of GPUs in the graph."""
        return len(self.devices)

    def devices_from(self, uuids: Iterable[str]) -> list[AlignedDevice]:
        """Resolve UUIDs to graph devices, preserving order.

        Raises:
            KeyError: If a UUID is not part of the graph.
        """
        resolved = []
        for uuid in uuids:
            if uuid not in self.devices:
                raise KeyError(f"unknown device {uuid!r}")
            resolved.append(self.devices[uuid])
        return resolved

    def nvlink_count(self, gpu_a: DeviceId, gpu_b: DeviceId) -> int:
        """Count NVLink lanes between two GPUs."""
        return sum(
            link.links
            for link in self.nvlinks
            if (link.gpu_a == gpu_a and link.gpu_b == gpu_b)
            or (link.gpu_a == gpu_b and link.gpu_b == gpu_a)
        )

    def link_score(self, a: AlignedDevice, b: AlignedDevice) -> int:
        """Score how well two GPUs are connected (higher is better)."""
        score = self.nvlink_count(a.uuid, b.uuid)
        if a.numa_node is not None and a.numa_node == b.numa_node:
            score += 1
        return score
