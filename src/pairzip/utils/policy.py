from enum import Enum


class ImbalancedPolicy(Enum):
    """What a zip does when one input sequence ends before the other."""

    TRUNCATE = 0
    """The output ends as soon as either input is exhausted."""

    PAD = 1
    """
    The output ends when both inputs are exhausted. The shorter side is padded
    at the end with a default value for its elements.
    """

    FAIL = 2
    """SequenceLengthMismatchError is raised if one input ends but not the other."""

    @classmethod
    def parse(cls, value: "ImbalancedPolicy | str | int") -> "ImbalancedPolicy":
        """accepts a member, its (case-insensitive) name, or its numeric value"""

        if isinstance(value, ImbalancedPolicy):
            return value

        names = ", ".join(member.name.lower() for member in cls)
        error = ValueError(
            f"Unknown imbalance policy {value!r}; expecting one of {names}"
        )

        # bool is an int, but True is not a policy
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                raise error from None

        if not isinstance(value, str):
            raise error

        try:
            return cls[value.upper()]
        except KeyError:
            raise error from None
