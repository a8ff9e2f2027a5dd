from __future__ import annotations
from dataclasses import dataclass

@dataclass(frozen=True)
class CivilDateTime:
    year: int      # astronomical numbering: 0 = 1 BCE, -1 = 2 BCE
    month: int
    day: int
    hour: int = 12
    minute: int = 0
    second: float = 0.0

    def as_tuple(self) -> tuple[int, int, int, int, int, float]:
        return (self.year, self.month, self.day, self.hour, self.minute, self.second)

@dataclass(frozen=True)
class JulianPeriodYear:
    """Positions of one year within the three classical cycles and the Julian Period."""
    year: int
    solar: int          # 1..28
    lunar: int          # 1..19 (golden number)
    indiction: int      # 1..15
    julian_period: int  # 1..7980
