from __future__ import annotations

from .logging import logger  # noqa: F401
from .combinators import CapDelay, Concat, cap_delay, concat, concat_all, pipe
from .models import START, Decision, RetryPolicy, RetryStatus, Stop, Wait, delay_of
from .options import PolicyOptions
from .retry_policies import (
    Constant,
    Exponential,
    Limit,
    Linear,
    Never,
    constant_delay,
    exponential_backoff,
    limit_retries,
    linear_backoff,
    never,
)
from .simulator import apply_policy, dry_run, schedule, total_delay, unfold

__all__ = [
    "START",
    "CapDelay",
    "Concat",
    "Constant",
    "Decision",
    "Exponential",
    "Limit",
    "Linear",
    "Never",
    "PolicyOptions",
    "RetryPolicy",
    "RetryStatus",
    "Stop",
    "Wait",
    "apply_policy",
    "cap_delay",
    "concat",
    "concat_all",
    "constant_delay",
    "delay_of",
    "dry_run",
    "exponential_backoff",
    "limit_retries",
    "linear_backoff",
    "never",
    "pipe",
    "schedule",
    "total_delay",
    "unfold",
]
