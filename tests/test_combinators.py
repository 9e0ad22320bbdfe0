from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from retry_algebra.combinators import CapDelay, Concat, cap_delay, concat, concat_all, pipe
from retry_algebra.models import RetryStatus, Stop, Wait
from retry_algebra.retry_policies import (
    Constant,
    constant_delay,
    exponential_backoff,
    limit_retries,
    linear_backoff,
    never,
)

if TYPE_CHECKING:
    from random import Random

    from retry_algebra.models import RetryPolicy


def random_policy(r: Random, depth: int = 3) -> RetryPolicy:
    match r.randint(0, 6 if depth > 0 else 4):
        case 0:
            return constant_delay(r.randint(0, 1000))
        case 1:
            return limit_retries(r.randint(0, 10))
        case 2:
            return exponential_backoff(r.randint(0, 100))
        case 3:
            return linear_backoff(r.randint(0, 100))
        case 4:
            return never()
        case 5:
            return cap_delay(r.randint(0, 2000))(random_policy(r, depth - 1))
        case _:
            return concat(random_policy(r, depth - 1))(random_policy(r, depth - 1))


def statuses(n: int = 12) -> list[RetryStatus]:
    return [RetryStatus(iter_number=i) for i in range(n)]


def equivalent(p1: RetryPolicy, p2: RetryPolicy) -> bool:
    return all(p1.decide(s) == p2.decide(s) for s in statuses())


@pytest.mark.parametrize(
    ("first", "second", "expected"),
    [
        (constant_delay(300), constant_delay(200), Wait(300)),
        (constant_delay(200), constant_delay(300), Wait(300)),
        (constant_delay(300), never(), Stop()),
        (never(), constant_delay(300), Stop()),
        (never(), never(), Stop()),
        (constant_delay(0), constant_delay(0), Wait(0)),
    ],
)
def test_concat(first: RetryPolicy, second: RetryPolicy, expected: Wait | Stop) -> None:
    assert concat(second)(first).decide(RetryStatus(0)) == expected
    assert Concat(first, second).decide(RetryStatus(0)) == expected


@pytest.mark.parametrize(
    ("policy", "max_delay", "expected"),
    [
        (constant_delay(300), 2000, Wait(300)),
        (constant_delay(3000), 2000, Wait(2000)),
        (constant_delay(2000), 2000, Wait(2000)),
        (constant_delay(300), 0, Wait(0)),
        (never(), 2000, Stop()),
    ],
)
def test_cap_delay(policy: RetryPolicy, max_delay: float, expected: Wait | Stop) -> None:
    assert cap_delay(max_delay)(policy).decide(RetryStatus(0)) == expected
    assert CapDelay(policy, max_delay).decide(RetryStatus(0)) == expected


def test_cap_delay_cannot_resurrect_stopped_policy() -> None:
    policy = cap_delay(2000)(limit_retries(3))
    assert [policy.decide(s) for s in statuses(5)] == [Wait(0), Wait(0), Wait(0), Stop(), Stop()]


def test_cap_delay_matches_inner_policy(r: Random) -> None:
    for _ in range(100):
        policy = random_policy(r)
        m = r.randint(0, 2000)
        capped = cap_delay(m)(policy)
        for s in statuses():
            match policy.decide(s):
                case Wait(d):
                    assert capped.decide(s) == Wait(min(m, d))
                case Stop():
                    assert capped.decide(s) == Stop()


def test_cap_delay_is_idempotent(r: Random) -> None:
    for _ in range(100):
        policy = random_policy(r)
        m = r.randint(0, 2000)
        assert equivalent(cap_delay(m)(cap_delay(m)(policy)), cap_delay(m)(policy))


def test_concat_is_associative(r: Random) -> None:
    for _ in range(100):
        a, b, c = random_policy(r), random_policy(r), random_policy(r)
        assert equivalent(concat(c)(concat(b)(a)), concat(concat(c)(b))(a))


def test_concat_is_commutative(r: Random) -> None:
    for _ in range(100):
        a, b = random_policy(r), random_policy(r)
        assert equivalent(concat(b)(a), concat(a)(b))


def test_concat_stop_is_absorbing(r: Random) -> None:
    for _ in range(100):
        a = random_policy(r)
        assert equivalent(concat(never())(a), never())
        assert equivalent(concat(a)(never()), never())


def test_concat_all(r: Random) -> None:
    assert concat_all() == Constant(0)

    for _ in range(100):
        a, b, c = random_policy(r), random_policy(r), random_policy(r)
        assert concat_all(a) == a
        assert concat_all(a, b, c) == Concat(Concat(a, b), c)
        assert equivalent(concat_all(a, concat_all()), a)


def test_combinators_do_not_mutate_inputs() -> None:
    base = constant_delay(300)
    merged = concat(exponential_backoff(200))(base)
    capped = cap_delay(2000)(merged)

    assert base == constant_delay(300)
    assert merged == Concat(constant_delay(300), exponential_backoff(200))
    assert capped == CapDelay(merged, 2000)


def test_pipe_applies_left_to_right() -> None:
    policy = pipe(
        constant_delay(300),
        concat(exponential_backoff(200)),
        concat(limit_retries(5)),
        cap_delay(2000),
    )
    assert policy == CapDelay(
        Concat(Concat(constant_delay(300), exponential_backoff(200)), limit_retries(5)),
        2000,
    )


def test_pipe_without_combinators() -> None:
    policy = constant_delay(300)
    assert pipe(policy) is policy
