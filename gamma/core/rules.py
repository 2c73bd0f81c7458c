from __future__ import annotations
from dataclasses import dataclass

from .types import UINT32_MAX

@dataclass
class RulesConfig:
    width: int = 10
    height: int = 10
    players: int = 2
    areas: int = 3                     # max simultaneous areas per player

    def is_valid(self) -> bool:
        for v in (self.width, self.height, self.players, self.areas):
            if not (0 < v <= UINT32_MAX):
                return False
        return True

    @property
    def field_width(self) -> int:
        # chars needed for the largest player id
        return len(str(self.players))

    @property
    def total_fields(self) -> int:
        return self.width * self.height
