from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, final

from retry_algebra.models.decision import Stop

if TYPE_CHECKING:
    from retry_algebra.models.decision import Decision


@final
@dataclass(frozen=True)
class RetryStatus:
    """State of a retry sequence at a decision point.

    `previous_delay` is `None` only before any decision has been made.
    """

    iter_number: int
    previous_delay: Decision | None = None

    @property
    def stopped(self) -> bool:
        return isinstance(self.previous_delay, Stop)


START: Final = RetryStatus(iter_number=0, previous_delay=None)
