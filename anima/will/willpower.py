"""
Willpower — the depletable resource behind self-control.

Overriding a gut feeling costs something. This module models that cost as a
scalar budget (the ego-depletion model): exerting willpower drains it, rest
refills it slowly, and practice permanently raises its ceiling. Running out is
not an error. It is the ordinary reason an agent gives in to temptation.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Optional

import structlog

from anima.config import WillpowerConfig, default_willpower_config

logger = structlog.get_logger(__name__)


@dataclass
class WillpowerState:
    """
    One agent's willpower budget.

    ``current`` stays within [0, max]. ``max`` only grows, through ``train``,
    and never past ``cap`` (twice the baseline capacity by default).
    """
    current: float = 1.0
    max: float = 1.0
    depletion_rate: float = 0.05
    recovery_rate: float = 0.01
    last_rest_timestamp: float = field(default_factory=time.time)
    cap: float = 2.0
    depletion_threshold: float = 0.2

    @classmethod
    def from_config(cls, config: Optional[WillpowerConfig] = None) -> WillpowerState:
        config = config or default_willpower_config()
        return cls(
            current=config.initial,
            max=config.baseline_max,
            depletion_rate=config.depletion_rate,
            recovery_rate=config.recovery_rate,
            cap=config.baseline_max * config.capacity_cap_multiplier,
            depletion_threshold=config.depletion_threshold,
        )

    def exert(self, effort: float) -> bool:
        """
        Try to spend willpower on a costly act of self-control.

        Fails without any change when the budget cannot cover ``effort``.
        On success the budget drops by ``effort * depletion_rate``.
        """
        if self.current < effort:
            logger.info(
                "will.exertion_failed",
                effort=effort,
                current=round(self.current, 4),
            )
            return False

        self.current = max(0.0, min(self.max, self.current - effort * self.depletion_rate))
        if self.is_depleted():
            logger.info("will.ego_depleted", current=round(self.current, 4))
        return True

    def rest(self, duration: float, now: Optional[float] = None) -> float:
        """Recover over ``duration`` seconds of rest. Returns the amount recovered."""
        before = self.current
        recovery = self.recovery_rate * max(0.0, duration)
        self.current = max(0.0, min(self.max, self.current + recovery))
        self.last_rest_timestamp = time.time() if now is None else now
        return self.current - before

    def is_depleted(self) -> bool:
        """Ego depletion: too little left to resist much of anything."""
        return self.current < self.depletion_threshold

    def train(self, amount: float = 0.01) -> float:
        """
        Permanently grow capacity through practice.

        Negative amounts are ignored: capacity never shrinks. The current
        budget is untouched; it fills into the new headroom through rest.
        """
        self.max = min(self.cap, self.max + max(0.0, amount))
        return self.max

    def to_dict(self) -> dict[str, Any]:
        """Serialize for storage."""
        return {
            "current": self.current,
            "max": self.max,
            "depletion_rate": self.depletion_rate,
            "recovery_rate": self.recovery_rate,
            "last_rest_timestamp": self.last_rest_timestamp,
            "cap": self.cap,
            "depletion_threshold": self.depletion_threshold,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> WillpowerState:
        cap = float(data.get("cap", 2.0))
        maximum = max(1.0, min(cap, float(data.get("max", 1.0))))
        return cls(
            current=max(0.0, min(maximum, float(data.get("current", maximum)))),
            max=maximum,
            depletion_rate=float(data.get("depletion_rate", 0.05)),
            recovery_rate=float(data.get("recovery_rate", 0.01)),
            last_rest_timestamp=float(data.get("last_rest_timestamp", time.time())),
            cap=cap,
            depletion_threshold=float(data.get("depletion_threshold", 0.2)),
        )
