from __future__ import annotations

from .cap_delay import CapDelay, cap_delay
from .concat import Concat, concat, concat_all
from .pipe import pipe

__all__ = ["CapDelay", "Concat", "cap_delay", "concat", "concat_all", "pipe"]
