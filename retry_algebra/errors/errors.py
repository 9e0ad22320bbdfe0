from __future__ import annotations

import json
from typing import Any


class RetryAlgebraError(Exception):
    def __init__(self, mesg: str, code: float, details: Any = None) -> None:
        super().__init__(mesg)
        self.mesg = mesg
        self.code = code
        try:
            self.details = json.dumps(details, indent=2) if details else None
        except (TypeError, ValueError):
            self.details = details

    def __str__(self) -> str:
        return f"[{self.code:09.5f}] {self.mesg}{'\n' + self.details if self.details else ''}"

    def __reduce__(self) -> str | tuple[Any, ...]:
        return (self.__class__, (self.mesg, self.code, self.details))


# Error codes 100-199


class ValidationError(RetryAlgebraError):
    def __init__(self, mesg: str) -> None:
        super().__init__(mesg, 100)

    def __reduce__(self) -> str | tuple[Any, ...]:
        return (self.__class__, (self.mesg,))


# Error codes 200-299


class EncoderError(RetryAlgebraError):
    def __init__(self, mesg: str) -> None:
        super().__init__(mesg, 200)

    def __reduce__(self) -> str | tuple[Any, ...]:
        return (self.__class__, (self.mesg,))
