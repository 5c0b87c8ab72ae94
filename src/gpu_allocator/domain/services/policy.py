"""Allocation policy selection.

Chooses which selection algorithm handles a request:
1. Aligned: no MIG devices in the inventory and no replica in the request,
   i.e. plain, unshared GPUs
2. Packed: devices are shared and the packed strategy is configured
3. Distributed: devices are shared and the distributed strategy is configured

A shared device layout without a configured strategy is an error rather
than a silent default.

References:
    - DESIGN.md (Open question decisions, item 2)
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from gpu_allocator.domain.entities.device import DeviceSet
from gpu_allocator.domain.errors import NoValidPolicyError, RequiredDeviceNotAvailableError
from gpu_allocator.domain.services.aligned import AlignedAllocator
from gpu_allocator.domain.services.distributed import DistributedAllocator
from gpu_allocator.domain.services.packed import PackedAllocator
from gpu_allocator.domain.value_objects.device_identifiers import AnnotatedIds, DeviceId
from gpu_allocator.domain.value_objects.sharing import AllocationPolicy, SharingStrategy

logger = logging.getLogger(__name__)


class AllocationPolicySelector:
    """Dispatches a preferred-allocation request to one algorithm.

    The selector keeps no per-request state. The inventory snapshot and the
    sharing strategy are passed with every call, so concurrent calls are safe
    as long as callers hand in snapshots that do not change under them.
    """

    def __init__(
        self,
        aligned: AlignedAllocator,
        packed: Optional[PackedAllocator] = None,
        distributed: Optional[DistributedAllocator] = None,
        validate_required_subset: bool = False,
    ) -> None:
        """Initialize the selector.

        Args:
            aligned: Aligned allocator wrapping the topology policy.
            packed: Packed allocator. Created if None.
            distributed: Distributed allocator. Created if None.
            validate_required_subset: Reject requests whose required
                devices are not all in the available list.
        """
        self._aligned = aligned
        self._packed = packed or PackedAllocator()
        self._distributed = distributed or DistributedAllocator()
        self._validate_required_subset = validate_required_subset

    def classify(
        self,
        devices: DeviceSet,
        available: Sequence[str],
        strategy: SharingStrategy,
    ) -> AllocationPolicy:
        """Determine which policy handles a request.

        Raises:
            NoValidPolicyError: If devices are shared and no strategy is set.
        """
        if not devices.contains_mig_devices() and not AnnotatedIds(available).any_has_annotations():
            return AllocationPolicy.ALIGNED
        if strategy == SharingStrategy.PACKED:
            return AllocationPolicy.PACKED
        if strategy == SharingStrategy.DISTRIBUTED:
            return AllocationPolicy.DISTRIBUTED
        raise NoValidPolicyError()

    def allocate(
        self,
        policy: AllocationPolicy,
        devices: DeviceSet,
        available: Sequence[str],
        required: Sequence[str],
        size: int,
    ) -> list[DeviceId]:
        """Run a given policy.

        Raises:
            RequiredDeviceNotAvailableError: If required-subset validation is
                enabled and a required device is not available.
            AllocationError: If the chosen algorithm fails.
        """
        if self._validate_required_subset:
            offered = set(available)
            missing = [r for r in required if r not in offered]
            if missing:
                raise RequiredDeviceNotAvailableError(missing)

        logger.debug(f"Running {policy.value} allocation for size={size} required={len(required)}")

        if policy == AllocationPolicy.ALIGNED:
            return self._aligned.allocate(available, required, size)
        if policy == AllocationPolicy.PACKED:
            return self._packed.allocate(devices, available, required, size)
        return self._distributed.allocate(devices, available, required, size)

    def select_and_allocate(
        self,
        devices: DeviceSet,
        strategy: SharingStrategy,
        available: Sequence[str],
        required: Sequence[str],
        size: int,
    ) -> list[DeviceId]:
        """Compute the preferred allocation for a request.

        Args:
            devices: Inventory snapshot for this call.
            strategy: Configured sharing strategy.
            available: Devices that may be selected.
            required: Devices that must be part of the result.
            size: Number of devices to return.

        Returns:
            Device IDs, starting with ``required`` in the given order.

        Raises:
            AllocationError: If no policy applies or the policy fails.
        """
        policy = self.classify(devices, available, strategy)
        return self.allocate(policy, devices, available, required, size)
