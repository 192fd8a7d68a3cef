# Copyright 2026. Invocation settings built from an explicit environment.

import os
import shlex
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

TOOL_ENV = "HSX_TOOL"
LOG_ENV = "HSX_LOG"
GHC_OPTIONS_ENV = "HSX_GHC_OPTIONS"

EXTENSION_PREFIX = "hsx-"


@dataclass(frozen=True)
class Settings:
    """Everything a single hsx run reads from its environment.

    Built once in the entry point and passed down, so tool selection and
    extension lookup never read ``os.environ`` themselves.
    """

    cwd: Path
    tool_override: str | None = None
    path_dirs: tuple[str, ...] = ()
    log_path: str = ""
    extra_ghc_options: tuple[str, ...] = ()

    @classmethod
    def from_env(cls, environ: Mapping[str, str], cwd: Path) -> "Settings":
        path = environ.get("PATH", "")
        return cls(
            cwd=Path(cwd),
            tool_override=environ.get(TOOL_ENV) or None,
            path_dirs=tuple(d for d in path.split(os.pathsep) if d),
            log_path=environ.get(LOG_ENV, ""),
            extra_ghc_options=tuple(shlex.split(environ.get(GHC_OPTIONS_ENV, ""))),
        )

    @property
    def search_path(self) -> str:
        return os.pathsep.join(self.path_dirs)
