"""
Capacity policies for the OIOO container.

A Phase pairs a PhaseType with the caller-chosen number of usable primary
slots. The PhaseType bounds that number to a fraction of the hard slot
ceiling:

    FULL     100% of the ceiling
    HALF      50% of the ceiling
    QUARTER   25% of the ceiling
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from fractions import Fraction

from oioo.errors import InvalidConfiguration


class PhaseType(Enum):
    """Named capacity policy."""
    FULL = "full"
    HALF = "half"
    QUARTER = "quarter"

    @property
    def fraction(self) -> Fraction:
        """Share of the hard slot ceiling usable as primary slots."""
        return _PHASE_FRACTIONS[self]


_PHASE_FRACTIONS: dict[PhaseType, Fraction] = {
    PhaseType.FULL: Fraction(1),
    PhaseType.HALF: Fraction(1, 2),
    PhaseType.QUARTER: Fraction(1, 4),
}


@dataclass(frozen=True, slots=True)
class Phase:
    """
    A capacity policy carrying its occupancy.

    Occupancy is the absolute number of primary slots the container may
    fill. It must be a positive integer; the ceiling imposed by the
    PhaseType is checked by validate(), which the container calls with its
    configured slot ceiling.

    Example:
        phase = Phase.half(occupancy=10)
        phase.validate(max_slots=100)   # ok, HALF allows up to 50
        phase.validate(max_slots=10)    # raises, HALF allows up to 5
    """
    phase_type: PhaseType
    occupancy: int

    def __post_init__(self) -> None:
        if not isinstance(self.phase_type, PhaseType):
            raise InvalidConfiguration(
                "Phase type must be a PhaseType",
                field="phase_type",
                value=self.phase_type,
            )

        # bool is an int subclass but never a slot count
        if isinstance(self.occupancy, bool) or not isinstance(self.occupancy, int):
            raise InvalidConfiguration(
                "Occupancy must be an integer",
                field="occupancy",
                value=self.occupancy,
                phase=self.phase_type.name,
            )

        if self.occupancy <= 0:
            raise InvalidConfiguration(
                "Occupancy must be positive",
                field="occupancy",
                value=self.occupancy,
                phase=self.phase_type.name,
            )

    @classmethod
    def full(cls, occupancy: int) -> Phase:
        return cls(PhaseType.FULL, occupancy)

    @classmethod
    def half(cls, occupancy: int) -> Phase:
        return cls(PhaseType.HALF, occupancy)

    @classmethod
    def quarter(cls, occupancy: int) -> Phase:
        return cls(PhaseType.QUARTER, occupancy)

    @property
    def name(self) -> str:
        return self.phase_type.name

    def max_occupancy(self, max_slots: int) -> int:
        """Largest occupancy this phase admits under a slot ceiling (at least 1)."""
        return max(1, int(max_slots * self.phase_type.fraction))

    def validate(self, max_slots: int) -> None:
        """Raise InvalidConfiguration if occupancy exceeds the phase ceiling."""
        limit = self.max_occupancy(max_slots)
        if self.occupancy > limit:
            raise InvalidConfiguration(
                f"Occupancy {self.occupancy} exceeds {self.name} phase limit of {limit}",
                field="occupancy",
                value=self.occupancy,
                phase=self.name,
                max_slots=max_slots,
                max_occupancy=limit,
            )
