from __future__ import annotations

from dataclasses import dataclass

from oioo.env import Env
from oioo.errors import InvalidConfiguration


@dataclass(slots=True)
class ContainerConfig:
    """
    Configuration for the OIOO container.
    """

    padding: int = 6                # Padding slots trailing every primary slot
    max_slots: int = 1_000_000      # Hard ceiling the phase fractions apply to
    seed: int | None = None         # Seed for the default random source

    @classmethod
    def from_env(cls, env: Env) -> ContainerConfig:
        """
        Create a configuration instance from environment settings.
        """
        return cls(
            padding=env.OIOO_PADDING,
            max_slots=env.OIOO_MAX_SLOTS,
            seed=env.OIOO_SEED,
        )

    def validate(self) -> None:
        if isinstance(self.padding, bool) or not isinstance(self.padding, int) or self.padding < 0:
            raise InvalidConfiguration(
                "Padding must be a non-negative integer",
                field="padding",
                value=self.padding,
            )

        if isinstance(self.max_slots, bool) or not isinstance(self.max_slots, int) or self.max_slots < 1:
            raise InvalidConfiguration(
                "Slot ceiling must be a positive integer",
                field="max_slots",
                value=self.max_slots,
            )

        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise InvalidConfiguration(
                "Seed must be an integer or None",
                field="seed",
                value=self.seed,
            )
