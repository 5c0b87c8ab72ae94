"""Sharing strategy and allocation policy enumerations."""

from __future__ import annotations

from enum import Enum


class SharingStrategy(str, Enum):
    """How replicas of time-sliced GPUs are handed out."""
    NONE = "none"                 # No sharing policy configured
    PACKED = "packed"             # Fill one GPU's replicas before the next
    DISTRIBUTED = "distributed"   # Spread replicas evenly across GPUs


class AllocationPolicy(str, Enum):
    """Selection algorithm chosen for a request."""
    ALIGNED = "aligned"
    PACKED = "packed"
    DISTRIBUTED = "distributed"
