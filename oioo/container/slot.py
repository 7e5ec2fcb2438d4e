from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Slot:
    """
    Metadata for one primary slot in the padded layout.

    Padding slots are never stored; their positions are derived from the
    slot index so the layout can be reported without allocating it.
    """
    index: int
    padding: int

    @property
    def span(self) -> int:
        """Primary slot plus its trailing padding."""
        return 1 + self.padding

    @property
    def offset(self) -> int:
        """Position of the primary slot in the padded layout."""
        return self.index * self.span

    @property
    def padding_range(self) -> range:
        """Positions of the padding slots following this slot."""
        return range(self.offset + 1, self.offset + self.span)
