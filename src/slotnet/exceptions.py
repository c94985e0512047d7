"""Allocator exception classes."""


class AllocatorError(Exception):
    """Base exception for UID and subnet allocation."""

    pass


class CapacityExhaustedError(AllocatorError):
    """Every reservation attempt collided with an existing marker."""

    def __init__(self, location: str, attempts: int):
        self.location = location
        self.attempts = attempts
        super().__init__(
            f"No free UID available at {location} after {attempts} attempts"
        )


class StorageError(AllocatorError):
    """Unexpected failure of the backing reservation store."""

    def __init__(self, message: str, path: str):
        self.path = path
        super().__init__(f"{message}: {path}")


class NotReservedError(AllocatorError):
    """Release requested for a UID that holds no marker."""

    def __init__(self, uid: int):
        self.uid = uid
        super().__init__(f"UID {uid} is not reserved")


class ConfigurationError(AllocatorError, ValueError):
    """Invalid supernet, anchor or UID range."""

    pass


class SubnetOutOfRangeError(AllocatorError):
    """A derived subnet fell outside the configured supernet."""

    def __init__(self, address: str, supernet: str):
        self.address = address
        self.supernet = supernet
        super().__init__(
            f"The assigned IP {address} falls out of the allowed subnet {supernet}"
        )
