from __future__ import annotations

from dataclasses import dataclass
from typing import final

from typing_extensions import assert_never

type Decision = Wait | Stop


@final
@dataclass(frozen=True)
class Wait:
    delay: float


@final
@dataclass(frozen=True)
class Stop: ...


def delay_of(decision: Decision) -> float | None:
    match decision:
        case Wait(delay):
            return delay
        case Stop():
            return None
        case _:
            assert_never(decision)
