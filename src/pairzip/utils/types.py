from collections.abc import Callable
from typing import final

type Combiner[T, U, R] = Callable[[T, U], R]
"""Combines the i-th element of the first sequence with the i-th of the second."""


# why doesn't python have a cleaner "no value given" marker?
@final
class Infer:
    """
    Marker for a pad value that should be derived from the elements seen on
    that side, rather than given explicitly. None is a legitimate pad value so
    it cannot play this role.
    """

    _instance: "Infer | None" = None

    def __new__(cls) -> "Infer":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "INFER"

    def __reduce__(self) -> str:
        return "INFER"


INFER = Infer()
