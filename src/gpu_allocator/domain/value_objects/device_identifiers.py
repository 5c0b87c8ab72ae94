"""Device identifiers and the replica annotation codec.

A device ID is an opaque string naming one allocatable unit. When a physical
GPU is shared through time-slicing, each share is exposed under an annotated
ID of the form ``<base-id>::<replica>``. Stripping the annotation yields the
ID of the physical device the share belongs to.
"""

from __future__ import annotations

from typing import Iterable, NewType

# Allocatable unit identifier (UUID, MIG UUID, or annotated replica ID)
DeviceId = NewType("DeviceId", str)

ANNOTATION_SEPARATOR = "::"


class AnnotatedId(str):
    """A device ID that may carry a replica annotation."""

    @classmethod
    def new(cls, base_id: str, replica: int) -> AnnotatedId:
        """Build the annotated ID of one replica of a physical device."""
        return cls(f"{base_id}{ANNOTATION_SEPARATOR}{replica}")

    def _split(self) -> list[str]:
        return str(self).split(ANNOTATION_SEPARATOR)

    def has_annotation(self) -> bool:
        """Check whether the ID names a replica rather than a whole device."""
        return len(self._split()) == 2

    def get_id(self) -> DeviceId:
        """Return the base physical-device ID with any annotation stripped."""
        if self.has_annotation():
            return DeviceId(self._split()[0])
        return DeviceId(str(self))


class AnnotatedIds(list):
    """A list of device IDs queried as annotated IDs."""

    def __init__(self, ids: Iterable[str] = ()) -> None:
        super().__init__(AnnotatedId(i) for i in ids)

    def any_has_annotations(self) -> bool:
        """Check whether any ID in the list carries a replica annotation."""
        return any(i.has_annotation() for i in self)

    def get_ids(self) -> list[DeviceId]:
        """Return the base IDs, in order, duplicates included."""
        return [i.get_id() for i in self]
