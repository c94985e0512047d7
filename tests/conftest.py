import pytest
from loguru import logger

from slotnet.store import DirectoryReservationStore, MemoryReservationStore


@pytest.fixture(params=["directory", "memory"])
def store(request, tmp_path):
    """Each reservation store backend, empty."""
    if request.param == "directory":
        return DirectoryReservationStore(str(tmp_path / "uids"))
    return MemoryReservationStore()


@pytest.fixture(autouse=True)
def _reset_log_sinks():
    yield
    # CLI runs point sinks at captured streams that are closed afterwards
    logger.remove()
    logger.configure(extra={})
