"""
Configuration of the rules engine.

Only a single switch for now: which set of movement rules to apply.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Self


class RulesPolicy(Enum):
    """
    SIMPLIFIED: pure end-point geometry. Sliding pieces jump over whatever stands in between, the king may "move" onto its own square,
                and landing on a friendly piece is only filtered out when enumerating moves.
    STRICT: sliding pieces need a clear path, a piece must actually leave its square,
            and landing on a friendly piece is already rejected when validating a single move.
    """

    SIMPLIFIED = "simplified"
    STRICT = "strict"


@dataclass(frozen=True)
class RulesConfig:
    policy: RulesPolicy = RulesPolicy.SIMPLIFIED

    @classmethod
    def strict(cls) -> Self:
        return cls(policy=RulesPolicy.STRICT)

    @property
    def is_strict(self) -> bool:
        return self.policy == RulesPolicy.STRICT


DEFAULT_RULES = RulesConfig()
