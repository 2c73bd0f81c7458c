from __future__ import annotations
from dataclasses import dataclass


# Owner value of an unclaimed cell
FREE = 0

# Largest value accepted for any id, dimension or coordinate
UINT32_MAX = 2 ** 32 - 1


@dataclass
class PlayerRecord:
    occupied_fields: int = 0
    occupied_areas: int = 0
    golden_used: bool = False


    def copy(self) -> "PlayerRecord":
        return PlayerRecord(self.occupied_fields, self.occupied_areas, self.golden_used)
