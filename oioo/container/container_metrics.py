from dataclasses import dataclass


@dataclass(slots=True)
class ContainerMetrics:
    """Metrics for container observability."""

    total_inserted: int = 0       # Items handed to one_in
    total_removed: int = 0        # Items returned by one_out
    total_queued: int = 0         # Items that went to the overflow queue
    total_promoted: int = 0       # Items moved from the queue into a slot
    empty_retrievals: int = 0     # one_out calls that returned EMPTY

    peak_occupied: int = 0        # High water mark for primary slots
    peak_queued: int = 0          # High water mark for the overflow queue
