"""In-process reservation store for single-process deployments."""

import threading

from slotnet.exceptions import NotReservedError
from slotnet.store.base import ReservationStore


class MemoryReservationStore(ReservationStore):
    """
    Reservation markers kept in a set guarded by a lock.

    Only coordinates callers inside one process. Use
    DirectoryReservationStore when several processes allocate on one host.
    """

    def __init__(self, name: str = "memory"):
        self.name = name
        self._uids: set[int] = set()
        self._lock = threading.Lock()

    @property
    def location(self) -> str:
        return f"<{self.name}>"

    def claim(self, uid: int) -> bool:
        with self._lock:
            if uid in self._uids:
                return False
            self._uids.add(uid)
            return True

    def release(self, uid: int) -> None:
        with self._lock:
            if uid not in self._uids:
                raise NotReservedError(uid)
            self._uids.remove(uid)

    def is_reserved(self, uid: int) -> bool:
        with self._lock:
            return uid in self._uids

    def reserved(self) -> list[int]:
        with self._lock:
            return sorted(self._uids)
