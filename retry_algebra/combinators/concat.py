from __future__ import annotations

from dataclasses import dataclass
from functools import partial, reduce
from typing import TYPE_CHECKING, Any, final

from typing_extensions import assert_never

from retry_algebra.models.decision import Stop, Wait
from retry_algebra.retry_policies import Constant

if TYPE_CHECKING:
    from collections.abc import Callable

    from retry_algebra.models.decision import Decision
    from retry_algebra.models.retry_policy import RetryPolicy
    from retry_algebra.models.status import RetryStatus


@final
@dataclass(frozen=True)
class Concat:
    """Merge of two policies that satisfies both.

    Retries continue only while both policies continue, and wait for the
    longer of the two delays. Merging is associative and commutative, `Stop`
    is absorbing and `Constant(0)` is the identity.
    """

    first: RetryPolicy
    second: RetryPolicy

    def __reduce__(self) -> str | tuple[Any, ...]:
        return (self.__class__, (self.first, self.second))

    def decide(self, status: RetryStatus) -> Decision:
        match self.first.decide(status), self.second.decide(status):
            case Wait(d1), Wait(d2):
                return Wait(max(d1, d2))
            case Stop(), _:
                return Stop()
            case _, Stop():
                return Stop()
            case decisions:
                assert_never(decisions)


def concat(second: RetryPolicy) -> Callable[[RetryPolicy], Concat]:
    return partial(Concat, second=second)


def concat_all(*policies: RetryPolicy) -> RetryPolicy:
    if not policies:
        return Constant(0)
    return reduce(Concat, policies)
