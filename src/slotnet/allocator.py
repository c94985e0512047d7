"""
UID and private subnet allocator.

Hands out per-host unique UIDs to execution units and maps every UID to its
own /30 network inside a private supernet.

Key Features:
- Optimistic reservation: random probing plus atomic create-if-absent,
  no locks or coordinator process
- Bounded retries (5x the UID range) before reporting exhaustion
- Stateless subnet derivation from (uid, configuration), nothing cached
"""

from __future__ import annotations

import os
import random
import secrets
import threading
from typing import TYPE_CHECKING

from slotnet.exceptions import CapacityExhaustedError, ConfigurationError
from slotnet.models.enums import StoreBackend
from slotnet.models.private_subnet import PrivateSubnetConfig
from slotnet.models.subnet import UIDSubnet
from slotnet.store import (
    DirectoryReservationStore,
    MemoryReservationStore,
    ReservationStore,
)
from slotnet.utils.logger import get_logger

if TYPE_CHECKING:
    from slotnet.config import AllocatorConfig

logger = get_logger(__name__)

# With a good random distribution, a few times the number of possible UIDs
# is enough attempts for every candidate to be tried eventually.
RETRY_FACTOR = 5


class Allocator:
    """
    Allocates globally unique (per host) UIDs and their /30 subnets.

    Uniqueness holds across every process that shares the same store.
    Subnets never overlap as long as the UID range fits in the number of
    /30 subnets the private supernet provides, which is checked at
    construction.
    """

    def __init__(
        self,
        store: ReservationStore,
        private_subnet: PrivateSubnetConfig,
        min_uid: int,
        max_uid: int,
        rng: random.Random | None = None,
    ):
        """
        Initialize the allocator.

        Args:
            store: Reservation store holding one marker per reserved UID
            private_subnet: Supernet and anchor /30 subnets are carved from
            min_uid: Smallest UID handed out (inclusive)
            max_uid: Largest UID handed out (inclusive)
            rng: Random source for probe order (seeded from secrets if omitted)

        Raises:
            ConfigurationError: If the UID range is empty, negative, or larger
                than the number of available subnets
        """
        if min_uid < 0:
            raise ConfigurationError(f"Invalid min_uid: {min_uid}. Must be >= 0.")
        if min_uid > max_uid:
            raise ConfigurationError(
                f"Invalid UID range: min_uid({min_uid}) > max_uid({max_uid})"
            )

        interval = max_uid - min_uid + 1
        if interval > private_subnet.available_subnets:
            raise ConfigurationError(
                f"UID range [{min_uid}, {max_uid}] holds {interval} UIDs but "
                f"{private_subnet} only provides {private_subnet.available_subnets} "
                f"/30 subnets; live UIDs would share subnets"
            )

        self.store = store
        self.private_subnet = private_subnet
        self.min_uid = min_uid
        self.max_uid = max_uid

        # Cheap PRNG seeded once with real entropy; only decides probe order
        self._rng = rng or random.Random(secrets.randbits(64))
        self._rng_lock = threading.Lock()

        logger.info(
            f"Allocator initialized: store={store.location}, "
            f"uids=[{min_uid}, {max_uid}], subnet={private_subnet}, "
            f"available_subnets={private_subnet.available_subnets}"
        )

    @classmethod
    def from_work_dir(
        cls,
        work_dir: str,
        private_subnet: PrivateSubnetConfig | None = None,
        min_uid: int = 3000,
        max_uid: int = 60000,
        uids_dir_name: str = "uids",
    ) -> Allocator:
        """
        Create an allocator whose markers live under ``work_dir/uids``.

        Raises:
            StorageError: If the reservation directory cannot be created
        """
        store = DirectoryReservationStore(os.path.join(work_dir, uids_dir_name))
        return cls(
            store,
            private_subnet or PrivateSubnetConfig.default(),
            min_uid,
            max_uid,
        )

    @classmethod
    def from_config(cls, config: AllocatorConfig) -> Allocator:
        """Create an allocator from an AllocatorConfig."""
        private_subnet = config.get_private_subnet()
        min_uid, max_uid = config.get_uid_range()

        match config.STORE_BACKEND:
            case StoreBackend.MEMORY:
                store = MemoryReservationStore()
            case _:
                store = DirectoryReservationStore(config.get_uids_dir())

        return cls(store, private_subnet, min_uid, max_uid)

    @property
    def uid_range(self) -> tuple[int, int]:
        return self.min_uid, self.max_uid

    @property
    def available_subnets(self) -> int:
        return self.private_subnet.available_subnets

    @property
    def max_attempts(self) -> int:
        """Number of probes before a reservation gives up."""
        return RETRY_FACTOR * (self.max_uid - self.min_uid + 1)

    def _draw(self) -> int:
        with self._rng_lock:
            return self._rng.randint(self.min_uid, self.max_uid)

    def reserve_uid(self) -> int:
        """
        Optimistically lock UIDs until one is successfully claimed.

        UIDs reserved here must be returned with free_uid when no longer
        needed; there is no expiry.

        Returns:
            The reserved UID

        Raises:
            CapacityExhaustedError: If every attempt hit a taken UID
            StorageError: On any unexpected store failure (not retried)
        """
        attempts = self.max_attempts
        for attempt in range(attempts):
            uid = self._draw()
            if self.store.claim(uid):
                logger.debug(f"Reserved UID {uid} after {attempt + 1} attempt(s)")
                return uid

        logger.warning(
            f"No free UID in [{self.min_uid}, {self.max_uid}] at "
            f"{self.store.location} after {attempts} attempts"
        )
        raise CapacityExhaustedError(self.store.location, attempts)

    def free_uid(self, uid: int) -> None:
        """
        Return a UID to the pool.

        Raises:
            NotReservedError: If the UID is not reserved
            StorageError: If the marker could not be removed
        """
        self.store.release(uid)
        logger.debug(f"Freed UID {uid}")

    def subnet_for_uid(self, uid: int) -> UIDSubnet:
        """
        Determine the /30 network for a UID.

        The UID range is wrapped onto the available subnets, so the same
        UID always yields the same network and UIDs in range never collide.

        Raises:
            SubnetOutOfRangeError: If the derived network escapes the supernet
        """
        shift = (uid - self.min_uid) % self.private_subnet.available_subnets
        return UIDSubnet(uid=uid, network=self.private_subnet.subnet_at(shift))

    def reserved_uids(self) -> list[int]:
        """List currently reserved UIDs."""
        return self.store.reserved()

    def __repr__(self) -> str:
        return (
            f"Allocator(store={self.store!r}, "
            f"uids=[{self.min_uid}, {self.max_uid}], "
            f"subnet={self.private_subnet})"
        )
