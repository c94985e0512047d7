"""
UID reservation store subpackage.

Re-exports the store interface and its backends:
    from slotnet.store import DirectoryReservationStore
    from slotnet.store import MemoryReservationStore
"""

from slotnet.store.base import ReservationStore
from slotnet.store.directory import DirectoryReservationStore
from slotnet.store.memory import MemoryReservationStore

__all__ = ["ReservationStore", "DirectoryReservationStore", "MemoryReservationStore"]
