"""Distributed allocation for time-sliced GPUs.

Spreads replica usage evenly across physical GPUs. Replicas already handed
out elsewhere (present in the inventory but not among the candidates) count
against their GPU, so a partially used GPU is only chosen once the others
have caught up.

References:
    - DESIGN.md (Open question decisions, item 1)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from gpu_allocator.domain.entities.device import DeviceSet
from gpu_allocator.domain.errors import InsufficientDevicesError
from gpu_allocator.domain.value_objects.device_identifiers import AnnotatedId, DeviceId

logger = logging.getLogger(__name__)


@dataclass
class ReplicaCount:
    """Replica accounting for one physical GPU."""
    total: int = 0        # Replicas of this GPU in the inventory
    available: int = 0    # Replicas of this GPU still selectable

    @property
    def used(self) -> int:
        """Replicas of this GPU that are already taken."""
        return self.total - self.available


def build_replica_accounting(devices: DeviceSet, candidates: Sequence[str]) -> dict[DeviceId, ReplicaCount]:
    """Count total and available replicas for every GPU a candidate belongs to."""
    replicas: dict[DeviceId, ReplicaCount] = {}
    for c in candidates:
        replicas.setdefault(AnnotatedId(c).get_id(), ReplicaCount()).available += 1

    for device in devices.values():
        counts = replicas.get(device.base_id)
        if counts is not None:
            counts.total += 1

    return replicas


class DistributedAllocator:
    """Select replicas so that usage stays balanced across GPUs."""

    def allocate(
        self,
        devices: DeviceSet,
        available: Sequence[str],
        required: Sequence[str],
        size: int,
    ) -> list[DeviceId]:
        """Pick ``size - len(required)`` candidates one at a time.

        Before each pick the remaining candidates are ordered by how many
        replicas of their GPU are already taken, least first. Equal counts
        keep the order the candidates were given in.

        Args:
            devices: Inventory snapshot.
            available: Devices that may be selected.
            required: Devices that must lead the result, kept as given.
            size: Number of devices to return. Callers pass
                ``size >= len(required)``; otherwise every required device
                is still returned and the result is longer than ``size``.

        Raises:
            InsufficientDevicesError: If there are too few candidates.
        """
        candidates = devices.subset(available).difference(devices.subset(required)).get_ids()
        needed = size - len(required)

        if len(candidates) < needed:
            raise InsufficientDevicesError(needed, len(candidates))

        replicas = build_replica_accounting(devices, candidates)
        position = {c: i for i, c in enumerate(candidates)}

        def rank(candidate: DeviceId) -> tuple[int, int]:
            return replicas[AnnotatedId(candidate).get_id()].used, position[candidate]

        picked: list[DeviceId] = []
        for _ in range(needed):
            candidates.sort(key=rank)
            choice = candidates.pop(0)
            replicas[AnnotatedId(choice).get_id()].available -= 1
            picked.append(choice)
            logger.debug(f"Distributed allocation picked {choice}")

        return [DeviceId(r) for r in required] + picked
