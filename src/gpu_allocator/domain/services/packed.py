"""Packed allocation for time-sliced GPUs.

Annotated IDs are the base ID followed by a replica suffix, so sorting the
candidates lexicographically keeps all replicas of one GPU together. Taking
from the front of that order fills one GPU before spilling onto the next.
"""

from __future__ import annotations

import logging
from typing import Sequence

from gpu_allocator.domain.entities.device import DeviceSet
from gpu_allocator.domain.errors import InsufficientDevicesError
from gpu_allocator.domain.value_objects.device_identifiers import DeviceId

logger = logging.getLogger(__name__)


class PackedAllocator:
    """Select replicas so that each GPU is exhausted before the next one."""

    def allocate(
        self,
        devices: DeviceSet,
        available: Sequence[str],
        required: Sequence[str],
        size: int,
    ) -> list[DeviceId]:
        """Return ``required`` followed by the sorted candidates, cut to ``size``.

        Args:
            devices: Inventory snapshot.
            available: Devices that may be selected.
            required: Devices that must lead the result, kept as given.
            size: Number of devices to return. Callers pass
                ``size >= len(required)``; otherwise the result is
                ``required`` cut to ``size``.

        Raises:
            InsufficientDevicesError: If fewer than ``size`` devices exist.
        """
        candidates = sorted(devices.subset(available).difference(devices.subset(required)).get_ids())

        selected = [DeviceId(r) for r in required] + candidates
        if len(selected) < size:
            raise InsufficientDevicesError(size - len(required), len(candidates))

        logger.debug(f"Packed allocation picked {selected[len(required):size]}")
        return selected[:size]
