# Copyright 2026. Delegate protocol — hand the run over to another program.

from collections.abc import Mapping, Sequence
from typing import Protocol


class Delegate(Protocol):
    def exec(self, argv: Sequence[str], env: Mapping[str, str] | None = None) -> int: ...
