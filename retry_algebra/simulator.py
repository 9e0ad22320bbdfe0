from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from retry_algebra.clocks import StepClock
from retry_algebra.models.decision import Wait
from retry_algebra.models.status import START, RetryStatus

if TYPE_CHECKING:
    from collections.abc import Iterator

    from retry_algebra.models.clock import Clock
    from retry_algebra.models.retry_policy import RetryPolicy

logger = logging.getLogger(__name__)


def apply_policy(policy: RetryPolicy, status: RetryStatus) -> RetryStatus:
    """Record the decision `policy` makes for `status` without waiting."""
    return RetryStatus(iter_number=status.iter_number + 1, previous_delay=policy.decide(status))


def unfold(policy: RetryPolicy, status: RetryStatus = START) -> Iterator[RetryStatus]:
    """Lazily yield every status produced by repeatedly applying `policy`.

    The first status carrying `Stop` is yielded and ends the sequence. A
    policy that never stops yields forever, slice it with `itertools.islice`.
    """
    while True:
        status = apply_policy(policy, status)
        logger.debug("iter=%d decision=%s", status.iter_number, status.previous_delay)
        yield status
        if status.stopped:
            return


def dry_run(policy: RetryPolicy) -> list[RetryStatus]:
    """Apply `policy` from `START` keeping all intermediate statuses, oldest first.

    The caller must ensure `policy` eventually stops (for example by merging
    it with `limit_retries`), otherwise this never returns.
    """
    return list(unfold(policy))


def schedule(policy: RetryPolicy, clock: Clock | None = None) -> list[tuple[float, RetryStatus]]:
    """Replay a dry run on a simulated clock.

    Each status is paired with the clock time at which its decision takes
    effect: the time of the retry for a `Wait`, the time of giving up for the
    final `Stop`.
    """
    clock = clock or StepClock()
    timeline: list[tuple[float, RetryStatus]] = []

    for status in unfold(policy):
        if isinstance(status.previous_delay, Wait):
            clock.step(clock.time() + status.previous_delay.delay)
        timeline.append((clock.time(), status))

    return timeline


def total_delay(policy: RetryPolicy) -> float:
    return sum(s.previous_delay.delay for s in unfold(policy) if isinstance(s.previous_delay, Wait))
