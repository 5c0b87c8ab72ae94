"""Device entities representing the allocatable device inventory.

A DeviceSet is an immutable snapshot of every device the plugin advertises:
whole GPUs, MIG instances, or time-sliced replicas of either. The allocation
engine only reads it; refreshing the inventory happens elsewhere and produces
a new snapshot.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from gpu_allocator.domain.value_objects.device_identifiers import AnnotatedId, DeviceId


@dataclass(frozen=True)
class Device:
    """One allocatable device."""
    id: DeviceId
    index: str                    # "0" for a GPU, "0:1" for a MIG instance

    @property
    def is_mig_device(self) -> bool:
        """Check if the device is a MIG instance."""
        return ":" in self.index

    @property
    def base_id(self) -> DeviceId:
        """ID of the physical device this entry shares."""
        return AnnotatedId(self.id).get_id()


class DeviceSet(Mapping[DeviceId, Device]):
    """Read-only mapping of device ID to Device, in insertion order."""

    def __init__(self, devices: Iterable[Device] = ()) -> None:
        self._devices: Mapping[DeviceId, Device] = MappingProxyType(
            {d.id: d for d in devices}
        )

    def __getitem__(self, device_id: str) -> Device:
        return self._devices[device_id]

    def __iter__(self) -> Iterator[DeviceId]:
        return iter(self._devices)

    def __len__(self) -> int:
        return len(self._devices)

    def __repr__(self) -> str:
        return f"DeviceSet({list(self._devices)!r})"

    def contains_mig_devices(self) -> bool:
        """Check if any device in the set is a MIG instance."""
        return any(d.is_mig_device for d in self._devices.values())

    def subset(self, ids: Iterable[str]) -> DeviceSet:
        """Return the devices named by ``ids``, in ``ids`` order.

        Unknown IDs are skipped, repeated IDs are kept once.
        """
        return DeviceSet(self._devices[i] for i in dict.fromkeys(ids) if i in self._devices)

    def difference(self, other: DeviceSet) -> DeviceSet:
        """Return the devices of this set that are not in ``other``."""
        return DeviceSet(d for i, d in self._devices.items() if i not in other)

    def get_ids(self) -> list[DeviceId]:
        """Return all device IDs, in order."""
        return list(self._devices)

    def replicate(self, replicas: int) -> DeviceSet:
        """Expose every device as ``replicas`` time-sliced shares.

        Each share keeps the index of its physical device and is named with
        an annotated ID. A replica count of one or less leaves the set as is.
        """
        if replicas <= 1:
            return self
        return DeviceSet(
            Device(id=DeviceId(str(AnnotatedId.new(d.id, r))), index=d.index)
            for d in self._devices.values()
            for r in range(replicas)
        )
