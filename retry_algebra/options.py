from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from typing_extensions import TypedDict

from retry_algebra.combinators import cap_delay, concat, pipe
from retry_algebra.errors import ValidationError
from retry_algebra.retry_policies import constant_delay, exponential_backoff, limit_retries

if TYPE_CHECKING:
    from retry_algebra.models.retry_policy import Combinator, RetryPolicy


@dataclass(frozen=True)
class PolicyOptions:
    """Validated description of a composed retry policy.

    `build` produces `constant_delay(delay)` merged with the optional
    exponential backoff and retry limit, then capped by `max_delay`.
    """

    delay: float = 0
    base_delay: float | None = None
    max_retries: int | None = None
    max_delay: float | None = None

    def __post_init__(self) -> None:
        if isinstance(self.delay, bool) or not isinstance(self.delay, int | float):
            msg = f"delay must be `float`, got {type(self.delay).__name__}"
            raise TypeError(msg)

        if self.base_delay is not None and (isinstance(self.base_delay, bool) or not isinstance(self.base_delay, int | float)):
            msg = f"base_delay must be `float | None`, got {type(self.base_delay).__name__}"
            raise TypeError(msg)

        if self.max_retries is not None and (isinstance(self.max_retries, bool) or not isinstance(self.max_retries, int)):
            msg = f"max_retries must be `int | None`, got {type(self.max_retries).__name__}"
            raise TypeError(msg)

        if self.max_delay is not None and (isinstance(self.max_delay, bool) or not isinstance(self.max_delay, int | float)):
            msg = f"max_delay must be `float | None`, got {type(self.max_delay).__name__}"
            raise TypeError(msg)

        if not (self.delay >= 0):
            msg = "delay must be greater than or equal to zero"
            raise ValidationError(msg)
        if self.base_delay is not None and not (self.base_delay >= 0):
            msg = "base_delay must be greater than or equal to zero"
            raise ValidationError(msg)
        if self.max_retries is not None and not (self.max_retries >= 0):
            msg = "max_retries must be greater than or equal to zero"
            raise ValidationError(msg)
        if self.max_delay is not None and not (self.max_delay >= 0):
            msg = "max_delay must be greater than or equal to zero"
            raise ValidationError(msg)

    def merge(
        self,
        *,
        delay: float | None = None,
        base_delay: float | None = None,
        max_retries: int | None = None,
        max_delay: float | None = None,
    ) -> PolicyOptions:
        return PolicyOptions(
            delay=delay if delay is not None else self.delay,
            base_delay=base_delay if base_delay is not None else self.base_delay,
            max_retries=max_retries if max_retries is not None else self.max_retries,
            max_delay=max_delay if max_delay is not None else self.max_delay,
        )

    def to_dict(self) -> DictOptions:
        return DictOptions(
            delay=self.delay,
            base_delay=self.base_delay,
            max_retries=self.max_retries,
            max_delay=self.max_delay,
        )

    @classmethod
    def from_dict(cls, data: DictOptions) -> PolicyOptions:
        unknown = set(data) - set(DictOptions.__annotations__)
        if unknown:
            msg = f"unknown options: {', '.join(sorted(unknown))}"
            raise ValidationError(msg)

        return cls(
            delay=data.get("delay", 0),
            base_delay=data.get("base_delay"),
            max_retries=data.get("max_retries"),
            max_delay=data.get("max_delay"),
        )

    def build(self) -> RetryPolicy:
        combinators: list[Combinator] = []
        if self.base_delay is not None:
            combinators.append(concat(exponential_backoff(self.base_delay)))
        if self.max_retries is not None:
            combinators.append(concat(limit_retries(self.max_retries)))
        if self.max_delay is not None:
            combinators.append(cap_delay(self.max_delay))

        return pipe(constant_delay(self.delay), *combinators)


class DictOptions(TypedDict, total=False):
    delay: float
    base_delay: float | None
    max_retries: int | None
    max_delay: float | None
