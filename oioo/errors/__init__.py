from .errors import (
    InvalidConfiguration as InvalidConfiguration,
    OIOOError as OIOOError,
)
