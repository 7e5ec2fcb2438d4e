from enum import IntEnum


class ContainerState(IntEnum):
    """State of the container for monitoring."""
    EMPTY = 0        # Nothing stored, nothing queued
    PARTIAL = 1      # Some primary slots free, nothing queued
    FULL = 2         # Every primary slot taken, nothing queued
    FULL_QUEUED = 3  # Every primary slot taken, items waiting in overflow

    @classmethod
    def compute(cls, occupied: int, occupancy: int, queued: int) -> "ContainerState":
        if queued > 0:
            return cls.FULL_QUEUED

        if occupied == 0:
            return cls.EMPTY

        if occupied < occupancy:
            return cls.PARTIAL

        return cls.FULL
