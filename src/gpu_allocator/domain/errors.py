"""Allocation errors.

Every failure is terminal for the request: no partial allocation is ever
returned, and retrying after an inventory refresh is up to the caller.
"""

from __future__ import annotations

from typing import Sequence


class AllocationError(Exception):
    """Preferred allocation could not be computed."""
    pass


class InvalidDeviceListError(AllocationError):
    """A device ID could not be resolved for aligned allocation."""

    def __init__(self, which: str, cause: Exception) -> None:
        self.which = which
        super().__init__(f"unable to retrieve list of {which} devices: {cause}")


class InsufficientDevicesError(AllocationError):
    """Not enough candidate devices to satisfy the requested size."""

    def __init__(self, needed: int, candidates: int) -> None:
        self.needed = needed
        self.candidates = candidates
        super().__init__(
            f"not enough available devices to satisfy allocation "
            f"(needed {needed}, have {candidates})"
        )


class NoValidPolicyError(AllocationError):
    """Devices are shared but no sharing strategy is configured."""

    def __init__(self) -> None:
        super().__init__("no valid allocation policy selected")


class RequiredDeviceNotAvailableError(AllocationError):
    """Required devices missing from the available list."""

    def __init__(self, missing: Sequence[str]) -> None:
        self.missing = list(missing)
        super().__init__(f"required devices not available: {', '.join(self.missing)}")
