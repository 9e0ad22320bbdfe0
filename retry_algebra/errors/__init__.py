from __future__ import annotations

from .errors import EncoderError, RetryAlgebraError, ValidationError

__all__ = ["EncoderError", "RetryAlgebraError", "ValidationError"]
