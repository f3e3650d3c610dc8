from typing import Literal


class NullArgumentError(ValueError):
    """A required argument was None."""

    def __init__(self, param_name: str):
        super().__init__(f"{param_name} must not be None")
        self.param_name = param_name


class SequenceLengthMismatchError(ValueError):
    """
    Raised while zipping under the FAIL policy, at the moment one sequence is
    found exhausted while the other still has elements.

    `shorter` names the side that ran out first.
    """

    def __init__(self, shorter: Literal["first", "second"]):
        longer = "second" if shorter == "first" else "first"
        super().__init__(f"{shorter.capitalize()} sequence ran out before {longer}")
        self.shorter = shorter


def ensure_not_none[T](value: T | None, param_name: str) -> T:
    """eager argument check; returns the value unchanged"""

    if value is None:
        raise NullArgumentError(param_name)
    return value
