"""
Directory-backed reservation store.

Each reserved UID is a zero-length file named by its decimal value.
Markers are created with O_CREAT | O_EXCL, which is atomic across every
process sharing the filesystem, so independently started drivers on the
same host never hand out the same UID. Network filesystems without atomic
exclusive create must not be used as the backing directory.
"""

import os

from slotnet.exceptions import NotReservedError, StorageError
from slotnet.store.base import ReservationStore
from slotnet.utils.logger import get_logger

logger = get_logger(__name__)

DIR_MODE = 0o700
MARKER_MODE = 0o600


def _is_marker_name(name: str) -> bool:
    """Check that a file name is exactly what str(uid) produces."""
    return name.isascii() and name.isdigit() and str(int(name)) == name


class DirectoryReservationStore(ReservationStore):
    """Reservation markers stored as files in a single directory."""

    def __init__(self, path: str):
        """
        Initialize the store, creating the directory if needed.

        Args:
            path: Directory that holds one marker file per reserved UID

        Raises:
            StorageError: If the directory cannot be created
        """
        self.path = os.path.abspath(path)
        try:
            os.makedirs(self.path, mode=DIR_MODE, exist_ok=True)
        except OSError as e:
            logger.error(f"Failed to create reservation directory {self.path}: {e}")
            raise StorageError(
                f"Failed to create reservation directory ({e.strerror})", self.path
            ) from e

        logger.debug(f"Using reservation directory {self.path}")

    @property
    def location(self) -> str:
        return self.path

    def _marker(self, uid: int) -> str:
        return os.path.join(self.path, str(uid))

    def claim(self, uid: int) -> bool:
        marker = self._marker(uid)
        try:
            fd = os.open(marker, os.O_CREAT | os.O_EXCL | os.O_WRONLY, MARKER_MODE)
        except FileExistsError:
            return False
        except OSError as e:
            logger.error(f"Failed to create marker {marker}: {e}")
            raise StorageError(
                f"Failed to create marker for UID {uid} ({e.strerror})", marker
            ) from e

        try:
            os.close(fd)
        except OSError as e:
            logger.error(f"Failed to close marker {marker}: {e}")
            raise StorageError(
                f"Failed to close marker for UID {uid} ({e.strerror})", marker
            ) from e
        return True

    def release(self, uid: int) -> None:
        marker = self._marker(uid)
        try:
            os.remove(marker)
        except FileNotFoundError as e:
            logger.warning(f"Release of UID {uid} requested but {marker} is missing")
            raise NotReservedError(uid) from e
        except OSError as e:
            logger.error(f"Failed to remove marker {marker}: {e}")
            raise StorageError(
                f"Failed to remove marker for UID {uid} ({e.strerror})", marker
            ) from e

    def is_reserved(self, uid: int) -> bool:
        return os.path.exists(self._marker(uid))

    def reserved(self) -> list[int]:
        try:
            with os.scandir(self.path) as entries:
                names = [entry.name for entry in entries if entry.is_file()]
        except OSError as e:
            logger.error(f"Failed to list reservation directory {self.path}: {e}")
            raise StorageError(
                f"Failed to list reservation directory ({e.strerror})", self.path
            ) from e

        # Ignore anything that is not a marker (e.g. editor swap files, "007")
        return sorted(int(name) for name in names if _is_marker_name(name))
