from __future__ import annotations

from typing import TYPE_CHECKING

import jsonpickle

from retry_algebra.errors import EncoderError
from retry_algebra.models.encoder import Encoder
from retry_algebra.models.retry_policy import RetryPolicy

if TYPE_CHECKING:
    from typing import Any


class JsonPickleEncoder(Encoder[RetryPolicy, str]):
    """Encodes a composed policy so it can be stored and restored later."""

    def encode(self, obj: RetryPolicy) -> str:
        data = jsonpickle.encode(obj, unpicklable=True)
        assert data
        return data

    def decode(self, obj: str) -> RetryPolicy:
        try:
            policy: Any = jsonpickle.decode(obj)  # noqa: S301
        except (TypeError, ValueError) as e:
            msg = f"invalid policy payload: {e}"
            raise EncoderError(msg) from e

        if not isinstance(policy, RetryPolicy):
            msg = f"decoded object is not a retry policy, got {type(policy).__name__}"
            raise EncoderError(msg)

        return policy
