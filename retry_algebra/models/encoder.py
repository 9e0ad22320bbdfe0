from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Encoder[I, O](Protocol):
    """Two-way conversion between a value and its stored form.

    `decode` raises `EncoderError` for input it cannot convert back.
    """

    def encode(self, obj: I, /) -> O: ...
    def decode(self, obj: O, /) -> I: ...
