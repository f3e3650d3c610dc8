from dataclasses import dataclass
from typing import Any

from pairzip.utils.policy import ImbalancedPolicy
from pairzip.utils.types import INFER


@dataclass
class ZipOptions:
    """Configuration of a single zip: its imbalance policy and pad values."""

    policy: ImbalancedPolicy | str | int = ImbalancedPolicy.TRUNCATE
    first_default: Any = INFER  # pads the first sequence under PAD
    second_default: Any = INFER  # pads the second sequence under PAD

    def __post_init__(self):
        self.policy = ImbalancedPolicy.parse(self.policy)

    def to_dict(self) -> dict[str, Any]:
        """plain data form; pad values left to inference are omitted"""

        policy = ImbalancedPolicy.parse(self.policy)
        data: dict[str, Any] = {"policy": policy.name.lower()}

        if self.first_default is not INFER:
            data["first_default"] = self.first_default
        if self.second_default is not INFER:
            data["second_default"] = self.second_default

        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ZipOptions":
        return cls(**data)
