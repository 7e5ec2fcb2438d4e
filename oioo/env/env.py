from __future__ import annotations
from pydantic import BaseModel, StrictInt
from typing import Callable, Dict, Literal, Union

PrimaryType = Union[str, int, float, bytes, bool]


class Env(BaseModel):
    OIOO_PADDING: StrictInt = 6
    OIOO_MAX_SLOTS: StrictInt = 1_000_000
    OIOO_SEED: StrictInt | None = None
    OIOO_LOG_LEVEL: Literal[
        "trace", "debug", "info", "warn", "error", "critical", "fatal"
    ] = "info"
    OIOO_LOG_OUTPUT: Literal["stdout", "stderr"] = "stderr"

    @classmethod
    def types_map(cls) -> Dict[str, Callable[[str], PrimaryType]]:
        return {
            "OIOO_PADDING": int,
            "OIOO_MAX_SLOTS": int,
            "OIOO_SEED": int,
            "OIOO_LOG_LEVEL": str.lower,
            "OIOO_LOG_OUTPUT": str.lower,
        }
