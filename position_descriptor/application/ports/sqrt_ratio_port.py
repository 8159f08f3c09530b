from __future__ import annotations

from typing import Protocol


class SqrtRatioPort(Protocol):
    def get_sqrt_ratio_at_tick(self, *, tick: int) -> int:
        ...
