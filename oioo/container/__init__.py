from .container_config import ContainerConfig as ContainerConfig
from .container_metrics import ContainerMetrics as ContainerMetrics
from .container_state import ContainerState as ContainerState
from .empty import (
    EMPTY as EMPTY,
    Empty as Empty,
)
from .oioo import OIOO as OIOO
from .phase import (
    Phase as Phase,
    PhaseType as PhaseType,
)
from .slot import Slot as Slot
