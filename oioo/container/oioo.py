"""
One-In, One-Out container.

A bounded store that hands items back in uniformly random order rather
than FIFO or LIFO. Each stored item holds one primary slot followed by a
fixed number of padding slots that can never hold data. Items arriving
while every primary slot is taken wait in an unbounded FIFO overflow
queue, and each retrieval promotes the queue head into the slot it freed.

Padding is accounting only: the store is an array of occupancy slots and
padded positions are derived from slot indices.

Usage:
    container = OIOO[int](Phase.full(occupancy=4))

    for value in (10, 20, 30, 40, 50, 60):
        container.one_in(value)     # 50 and 60 wait in the queue

    value = container.one_out()     # one of 10, 20, 30, 40; 50 is promoted
    if value is EMPTY:
        ...
"""

from __future__ import annotations

import heapq
import random
from collections import deque
from typing import Any, Generic, Iterator, TypeVar

from oioo.env import Env, load_env
from oioo.logging import (
    ContainerDebug,
    ContainerTrace,
    LoggerStream,
    LoggingConfig,
    LogLevel,
)

from .container_config import ContainerConfig
from .container_metrics import ContainerMetrics
from .container_state import ContainerState
from .empty import EMPTY, Empty
from .phase import Phase
from .slot import Slot


T = TypeVar("T")

_VACANT = object()


class OIOO(Generic[T]):
    """
    Capacity-limited container with random retrieval and FIFO overflow.

    Invariants:
    - At most phase.occupancy primary slots are occupied.
    - The overflow queue is non-empty only while every slot is occupied.
    - Queued items are promoted in arrival order, one per retrieval.
    - An item is either in a slot, in the queue, or no longer tracked.

    Thread-safety:
    - None. Guard the whole container with a single lock per call if it is
      shared between threads.

    Randomness comes from an injectable random.Random. Pass a seeded
    instance (or set config.seed) for reproducible retrieval order.
    """

    def __init__(
        self,
        phase: Phase,
        config: ContainerConfig | None = None,
        padding: int | None = None,
        rng: random.Random | None = None,
        logger: LoggerStream | None = None,
    ):
        self._config = config or ContainerConfig()
        if padding is not None:
            self._config = ContainerConfig(
                padding=padding,
                max_slots=self._config.max_slots,
                seed=self._config.seed,
            )

        self._config.validate()
        phase.validate(self._config.max_slots)

        self._phase = phase
        self._occupancy = phase.occupancy
        self._padding = self._config.padding
        self._rng = rng or random.Random(self._config.seed)
        self._logger = logger or LoggerStream(name="oioo")

        # Slot storage, indexed by slot number
        self._store: list[Any] = [_VACANT] * self._occupancy

        # Occupied slot numbers in no particular order, for O(1) random pick
        self._occupied: list[int] = []

        # Min-heap of free slot numbers so inserts take the lowest one
        self._free: list[int] = list(range(self._occupancy))

        self._queue: deque[T] = deque()
        self._metrics = ContainerMetrics()

        if self._logger.enabled(LogLevel.DEBUG):
            self._logger.log(
                ContainerDebug(
                    message=f"Created {phase.name} container with padding {self._padding}",
                    occupied=0,
                    queued=0,
                    occupancy=self._occupancy,
                )
            )

    @classmethod
    def from_env(
        cls,
        phase: Phase,
        env: Env | None = None,
        rng: random.Random | None = None,
        logger: LoggerStream | None = None,
    ) -> OIOO[T]:
        """
        Create a container configured from OIOO_* environment settings,
        applying the configured log level and output as well.
        """
        if env is None:
            env = load_env(Env)

        LoggingConfig().update_from_env(env)

        return cls(
            phase,
            config=ContainerConfig.from_env(env),
            rng=rng,
            logger=logger,
        )

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def occupancy(self) -> int:
        """Maximum number of occupied primary slots."""
        return self._occupancy

    @property
    def padding(self) -> int:
        """Padding slots trailing each primary slot."""
        return self._padding

    @property
    def total_capacity(self) -> int:
        """Primary plus padding slots in the theoretical layout."""
        return self._occupancy * (1 + self._padding)

    @property
    def occupied(self) -> int:
        """Number of occupied primary slots."""
        return len(self._occupied)

    @property
    def queued(self) -> int:
        """Number of items waiting in the overflow queue."""
        return len(self._queue)

    @property
    def footprint(self) -> int:
        """Padded span taken up by the occupied slots."""
        return len(self._occupied) * (1 + self._padding)

    def one_in(self, item: T) -> None:
        """
        Insert an item.

        Takes the lowest free primary slot if there is one, otherwise
        joins the tail of the overflow queue. Never fails.
        """
        self._metrics.total_inserted += 1

        if self._free:
            self._place(heapq.heappop(self._free), item)

        else:
            self._queue.append(item)
            self._metrics.total_queued += 1
            self._metrics.peak_queued = max(
                self._metrics.peak_queued,
                len(self._queue),
            )

        if self._logger.enabled(LogLevel.TRACE):
            self._logger.log(
                ContainerTrace(
                    message="Item in",
                    occupied=len(self._occupied),
                    queued=len(self._queue),
                    occupancy=self._occupancy,
                )
            )

    def one_out(self) -> T | Empty:
        """
        Remove and return a uniformly random stored item.

        The freed slot is immediately refilled from the head of the
        overflow queue, if any.

        Returns:
            The removed item, or EMPTY when nothing is stored.
        """
        if not self._occupied:
            self._metrics.empty_retrievals += 1
            return EMPTY

        position = self._rng.randrange(len(self._occupied))
        slot = self._occupied[position]
        item = self._store[slot]

        self._vacate(position)
        self._metrics.total_removed += 1

        if self._queue:
            self._place(slot, self._queue.popleft())
            self._metrics.total_promoted += 1

            if self._logger.enabled(LogLevel.DEBUG):
                self._logger.log(
                    ContainerDebug(
                        message=f"Promoted queued item into slot {slot}",
                        occupied=len(self._occupied),
                        queued=len(self._queue),
                        occupancy=self._occupancy,
                    )
                )

        else:
            heapq.heappush(self._free, slot)

        if self._logger.enabled(LogLevel.TRACE):
            self._logger.log(
                ContainerTrace(
                    message=f"Item out of slot {slot}",
                    occupied=len(self._occupied),
                    queued=len(self._queue),
                    occupancy=self._occupancy,
                )
            )

        return item

    def drain(self) -> Iterator[T]:
        """Retrieve items until the container is empty."""
        while self._occupied:
            yield self.one_out()

    def at_capacity(self) -> bool:
        """Return True if every primary slot is occupied."""
        return len(self._occupied) >= self._occupancy

    def empty(self) -> bool:
        """Return True if no items are stored or queued."""
        return not self._occupied and not self._queue

    def contains(self, item: T) -> bool:
        return any(
            self._store[slot] == item for slot in self._occupied
        ) or item in self._queue

    def slots(self) -> Iterator[Slot]:
        """Yield layout metadata for each occupied slot, by slot number."""
        for index in sorted(self._occupied):
            yield Slot(index=index, padding=self._padding)

    def stored_items(self) -> list[T]:
        """Snapshot of stored items, by slot number."""
        return [self._store[index] for index in sorted(self._occupied)]

    def queued_items(self) -> list[T]:
        """Snapshot of the overflow queue, head first."""
        return list(self._queue)

    def get_state(self) -> ContainerState:
        return ContainerState.compute(
            len(self._occupied),
            self._occupancy,
            len(self._queue),
        )

    def get_fill_ratio(self) -> float:
        """Get primary slot fill ratio (0.0 - 1.0)."""
        return len(self._occupied) / self._occupancy

    def get_metrics(self) -> dict:
        """Get container metrics as dictionary."""
        return {
            "phase": self._phase.name,
            "occupied": len(self._occupied),
            "occupancy": self._occupancy,
            "queued": len(self._queue),
            "padding": self._padding,
            "total_capacity": self.total_capacity,
            "footprint": self.footprint,
            "fill_ratio": self.get_fill_ratio(),
            "state": self.get_state().name,
            "total_inserted": self._metrics.total_inserted,
            "total_removed": self._metrics.total_removed,
            "total_queued": self._metrics.total_queued,
            "total_promoted": self._metrics.total_promoted,
            "empty_retrievals": self._metrics.empty_retrievals,
            "peak_occupied": self._metrics.peak_occupied,
            "peak_queued": self._metrics.peak_queued,
        }

    def reset_metrics(self) -> None:
        """Reset all metrics counters."""
        self._metrics = ContainerMetrics()

    def clear(self) -> int:
        """
        Drop every stored and queued item.

        Returns:
            Number of items cleared
        """
        cleared = len(self._occupied) + len(self._queue)

        self._store = [_VACANT] * self._occupancy
        self._occupied.clear()
        self._free = list(range(self._occupancy))
        self._queue.clear()

        if self._logger.enabled(LogLevel.DEBUG):
            self._logger.log(
                ContainerDebug(
                    message=f"Cleared {cleared} items",
                    occupied=0,
                    queued=0,
                    occupancy=self._occupancy,
                )
            )

        return cleared

    def _place(self, slot: int, item: T) -> None:
        self._store[slot] = item
        self._occupied.append(slot)

        self._metrics.peak_occupied = max(
            self._metrics.peak_occupied,
            len(self._occupied),
        )

    def _vacate(self, position: int) -> None:
        slot = self._occupied[position]

        # Swap-remove: move the last occupied slot into this position
        last = self._occupied.pop()
        if last != slot:
            self._occupied[position] = last

        self._store[slot] = _VACANT

    def __contains__(self, item: object) -> bool:
        return self.contains(item)

    def __len__(self) -> int:
        """Return stored plus queued items."""
        return len(self._occupied) + len(self._queue)

    def __repr__(self) -> str:
        return (
            f"OIOO("
            f"phase={self._phase.name}, "
            f"occupied={len(self._occupied)}/{self._occupancy}, "
            f"queued={len(self._queue)}, "
            f"padding={self._padding}, "
            f"state={self.get_state().name})"
        )
