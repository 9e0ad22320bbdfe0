from __future__ import annotations

import json
from typing import Any

from typing_extensions import assert_never

from retry_algebra.errors import EncoderError
from retry_algebra.models.decision import Stop, Wait
from retry_algebra.models.encoder import Encoder
from retry_algebra.models.status import RetryStatus


class JsonEncoder(Encoder[list[RetryStatus], str]):
    """Encodes a sequence of statuses.

    A `Stop` decision is written as `null`, a status without a decision (such
    as `START`) has no `previous_delay` key.
    """

    def encode(self, obj: list[RetryStatus]) -> str:
        return json.dumps([_encode_status(s) for s in obj])

    def decode(self, obj: str) -> list[RetryStatus]:
        try:
            data = json.loads(obj)
        except json.JSONDecodeError as e:
            msg = f"invalid json: {e}"
            raise EncoderError(msg) from e

        if not isinstance(data, list):
            msg = f"expected a list of statuses, got {type(data).__name__}"
            raise EncoderError(msg)

        return [_decode_status(s) for s in data]


def _encode_status(status: RetryStatus) -> dict[str, Any]:
    match status.previous_delay:
        case Wait(delay):
            return {"iter_number": status.iter_number, "previous_delay": delay}
        case Stop():
            return {"iter_number": status.iter_number, "previous_delay": None}
        case None:
            return {"iter_number": status.iter_number}
        case decision:
            assert_never(decision)


def _decode_status(obj: Any) -> RetryStatus:
    match obj:
        case {"iter_number": bool()} | {"previous_delay": bool()}:
            pass
        case {"iter_number": int(iter_number), "previous_delay": None}:
            return RetryStatus(iter_number=iter_number, previous_delay=Stop())
        case {"iter_number": int(iter_number), "previous_delay": int(delay) | float(delay)}:
            return RetryStatus(iter_number=iter_number, previous_delay=Wait(delay))
        case {"iter_number": int(iter_number)} if "previous_delay" not in obj:
            return RetryStatus(iter_number=iter_number)

    msg = f"invalid status: {obj!r}"
    raise EncoderError(msg)
