from __future__ import annotations

from position_descriptor.application.ports.sqrt_ratio_port import SqrtRatioPort
from position_descriptor.domain.services.tick_math import get_sqrt_ratio_at_tick


class TickMathSqrtRatioProvider(SqrtRatioPort):
    def get_sqrt_ratio_at_tick(self, *, tick: int) -> int:
        return get_sqrt_ratio_at_tick(tick)
