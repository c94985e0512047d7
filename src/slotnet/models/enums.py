"""
Enumeration types for slotnet.
"""

from enum import Enum


class LogLevel(str, Enum):
    """
    Logging verbosity levels.

    Levels (from most to least verbose):
        - FULL: Complete trace with detailed stack information
        - DEBUG: Debug messages and above
        - INFO: Informational messages and above
        - WARNING: Only warnings and errors
    """

    FULL = "full"
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"


class StoreBackend(str, Enum):
    """
    Where UID markers live.

    - DIRECTORY: one file per UID, shared by every process on the host
    - MEMORY: in-process set, for single-process deployments
    """

    DIRECTORY = "directory"
    MEMORY = "memory"
