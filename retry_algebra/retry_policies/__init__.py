"""Policy primitives.

Preconditions are not checked: delays and `max_attempts` are expected to be
non-negative. Use `retry_algebra.options.PolicyOptions` for validated input.
"""

from __future__ import annotations

from .constant import Constant, constant_delay
from .exponential import Exponential, exponential_backoff
from .limit import Limit, limit_retries
from .linear import Linear, linear_backoff
from .never import Never, never

__all__ = [
    "Constant",
    "Exponential",
    "Limit",
    "Linear",
    "Never",
    "constant_delay",
    "exponential_backoff",
    "limit_retries",
    "linear_backoff",
    "never",
]
