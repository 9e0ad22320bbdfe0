from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, final

from retry_algebra.models.decision import Stop

if TYPE_CHECKING:
    from retry_algebra.models.decision import Decision
    from retry_algebra.models.status import RetryStatus


@final
@dataclass(frozen=True)
class Never:
    def __reduce__(self) -> str | tuple[Any, ...]:
        return (self.__class__, ())

    def decide(self, status: RetryStatus) -> Decision:
        return Stop()


def never() -> Never:
    return Never()
