from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, final

from retry_algebra.models.decision import Wait

if TYPE_CHECKING:
    from retry_algebra.models.decision import Decision
    from retry_algebra.models.status import RetryStatus


@final
@dataclass(frozen=True)
class Exponential:
    """Delay doubles every iteration, starting at `base_delay`.

    Never stops and grows without bound, pair it with `cap_delay` and
    `limit_retries`. A delay too large for a float saturates to `math.inf`.
    """

    base_delay: float = 1

    def __reduce__(self) -> str | tuple[Any, ...]:
        return (self.__class__, (self.base_delay,))

    def decide(self, status: RetryStatus) -> Decision:
        try:
            return Wait(self.base_delay * (2**status.iter_number))
        except OverflowError:
            if not self.base_delay:
                return Wait(self.base_delay)
            return Wait(math.copysign(math.inf, self.base_delay))


def exponential_backoff(base_delay: float) -> Exponential:
    return Exponential(base_delay=base_delay)
