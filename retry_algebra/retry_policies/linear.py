from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, final

from retry_algebra.models.decision import Wait

if TYPE_CHECKING:
    from retry_algebra.models.decision import Decision
    from retry_algebra.models.status import RetryStatus


@final
@dataclass(frozen=True)
class Linear:
    delay: float = 1

    def __reduce__(self) -> str | tuple[Any, ...]:
        return (self.__class__, (self.delay,))

    def decide(self, status: RetryStatus) -> Decision:
        return Wait(self.delay * (status.iter_number + 1))


def linear_backoff(delay: float) -> Linear:
    return Linear(delay=delay)
