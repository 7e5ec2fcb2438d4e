from .errors import (
    InvalidConfiguration as InvalidConfiguration,
    OIOOError as OIOOError,
)
from .env import (
    Env as Env,
    load_env as load_env,
)
from .container import (
    EMPTY as EMPTY,
    OIOO as OIOO,
    ContainerConfig as ContainerConfig,
    ContainerState as ContainerState,
    Empty as Empty,
    Phase as Phase,
    PhaseType as PhaseType,
    Slot as Slot,
)
