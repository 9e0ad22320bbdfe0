from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from retry_algebra.models.decision import Decision
    from retry_algebra.models.status import RetryStatus


@runtime_checkable
class RetryPolicy(Protocol):
    def decide(self, status: RetryStatus, /) -> Decision: ...


type Combinator = Callable[[RetryPolicy], RetryPolicy]
