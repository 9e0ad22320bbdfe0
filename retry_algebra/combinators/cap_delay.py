from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import TYPE_CHECKING, Any, final

from typing_extensions import assert_never

from retry_algebra.models.decision import Stop, Wait

if TYPE_CHECKING:
    from collections.abc import Callable

    from retry_algebra.models.decision import Decision
    from retry_algebra.models.retry_policy import RetryPolicy
    from retry_algebra.models.status import RetryStatus


@final
@dataclass(frozen=True)
class CapDelay:
    """Upper bound for any delay directed by `policy`.

    A policy that stops stays stopped.
    """

    policy: RetryPolicy
    max_delay: float

    def __reduce__(self) -> str | tuple[Any, ...]:
        return (self.__class__, (self.policy, self.max_delay))

    def decide(self, status: RetryStatus) -> Decision:
        match self.policy.decide(status):
            case Wait(delay):
                return Wait(min(self.max_delay, delay))
            case Stop() as stop:
                return stop
            case decision:
                assert_never(decision)


def cap_delay(max_delay: float) -> Callable[[RetryPolicy], CapDelay]:
    return partial(CapDelay, max_delay=max_delay)
