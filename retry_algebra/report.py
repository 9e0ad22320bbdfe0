from __future__ import annotations

from typing import TYPE_CHECKING

from tabulate import tabulate
from typing_extensions import assert_never

from retry_algebra.models.decision import Stop, Wait

if TYPE_CHECKING:
    from collections.abc import Iterable

    from retry_algebra.models.status import RetryStatus


def tabulate_run(statuses: Iterable[RetryStatus]) -> str:
    head = ["iter", "decision", "delay"]
    data = [[s.iter_number, *_cells(s)] for s in statuses]
    return tabulate(data, head, tablefmt="outline", colalign=("right", "left", "right"), disable_numparse=True)


def _cells(status: RetryStatus) -> tuple[str, str]:
    match status.previous_delay:
        case Wait(delay):
            return "wait", f"{delay:,g}"
        case Stop():
            return "stop", ""
        case None:
            return "", ""
        case decision:
            assert_never(decision)
