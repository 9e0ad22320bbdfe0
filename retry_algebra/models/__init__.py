from __future__ import annotations

from .decision import Decision, Stop, Wait, delay_of
from .retry_policy import Combinator, RetryPolicy
from .status import START, RetryStatus

__all__ = ["START", "Combinator", "Decision", "RetryPolicy", "RetryStatus", "Stop", "Wait", "delay_of"]
