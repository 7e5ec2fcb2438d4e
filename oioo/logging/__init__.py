from .config import LoggingConfig as LoggingConfig
from .models import (
    Entry as Entry,
    Log as Log,
    LogLevel as LogLevel,
    LogLevelName as LogLevelName,
)
from .oioo_logging_models import (
    ContainerDebug as ContainerDebug,
    ContainerTrace as ContainerTrace,
)
from .streams import (
    LoggerStream as LoggerStream,
)
