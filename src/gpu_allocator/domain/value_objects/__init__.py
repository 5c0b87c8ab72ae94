"""Domain value objects for the GPU allocator.

Value objects are immutable objects without identity that represent
core concepts like device IDs, replica annotations and sharing strategies.
"""

from gpu_allocator.domain.value_objects.device_identifiers import (
    ANNOTATION_SEPARATOR,
    AnnotatedId,
    AnnotatedIds,
    DeviceId,
)
from gpu_allocator.domain.value_objects.sharing import (
    AllocationPolicy,
    SharingStrategy,
)

__all__ = [
    "ANNOTATION_SEPARATOR",
    "AnnotatedId",
    "AnnotatedIds",
    "DeviceId",
    "AllocationPolicy",
    "SharingStrategy",
]
