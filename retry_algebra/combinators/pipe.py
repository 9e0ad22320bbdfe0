from __future__ import annotations

from functools import reduce
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from retry_algebra.models.retry_policy import Combinator, RetryPolicy


def pipe(policy: RetryPolicy, *combinators: Combinator) -> RetryPolicy:
    """Apply combinators left to right, each consuming the previous result."""
    return reduce(lambda acc, combinator: combinator(acc), combinators, policy)
