from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, final

from retry_algebra.models.decision import Stop, Wait

if TYPE_CHECKING:
    from retry_algebra.models.decision import Decision
    from retry_algebra.models.status import RetryStatus


@final
@dataclass(frozen=True)
class Limit:
    """Retry immediately, but only up to `max_attempts` times.

    Adds no delay of its own, combine it with another policy to space retries.
    """

    max_attempts: int

    def __reduce__(self) -> str | tuple[Any, ...]:
        return (self.__class__, (self.max_attempts,))

    def decide(self, status: RetryStatus) -> Decision:
        if status.iter_number >= self.max_attempts:
            return Stop()
        return Wait(0)


def limit_retries(max_attempts: int) -> Limit:
    return Limit(max_attempts=max_attempts)
