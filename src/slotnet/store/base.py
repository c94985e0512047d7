"""
Exclusive key store interface for UID markers.

A store only needs to offer atomic create-if-absent and delete. Whether it
coordinates threads in one process or independent processes on a host is
up to the backend.
"""

from abc import ABC, abstractmethod


class ReservationStore(ABC):
    """Set of reserved UIDs backed by exclusive create/delete."""

    @property
    @abstractmethod
    def location(self) -> str:
        """Human readable location of the markers, used in error messages."""

    @abstractmethod
    def claim(self, uid: int) -> bool:
        """
        Atomically create the marker for ``uid``.

        Returns:
            True if the caller now owns the UID, False if it was already taken.

        Raises:
            StorageError: On any failure other than "already exists"
        """

    @abstractmethod
    def release(self, uid: int) -> None:
        """
        Delete the marker for ``uid``.

        Raises:
            NotReservedError: If no marker exists
            StorageError: If the marker could not be removed
        """

    @abstractmethod
    def is_reserved(self, uid: int) -> bool:
        """Check whether a marker exists for ``uid``."""

    @abstractmethod
    def reserved(self) -> list[int]:
        """List currently reserved UIDs in ascending order."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.location!r})"
