from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Period:
    id: str
    name: str
    order: int
    is_break: bool = False
    applicable_days: Tuple[int, ...] = ()  # empty -> every school day

    def applies_on(self, day: int) -> bool:
        return not self.applicable_days or day in self.applicable_days
