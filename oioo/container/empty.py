from enum import Enum


class Empty(Enum):
    """
    Absence marker returned by OIOO.one_out() when no item is stored.

    Distinct from None so that None can itself be stored. Falsy, so callers
    can branch on it directly, but `result is EMPTY` is the exact check.
    """
    EMPTY = "EMPTY"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "EMPTY"


EMPTY = Empty.EMPTY
