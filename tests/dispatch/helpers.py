"""Shared fixtures and helpers for dispatch tests."""

import stat
from pathlib import Path

from hsx.core.config import Settings


class RecordingDelegate:
    """Delegate that records what would have been executed."""

    def __init__(self, exit_code: int = 0):
        self.exit_code = exit_code
        self.calls: list[tuple[list[str], dict | None]] = []

    def exec(self, argv, env=None) -> int:
        self.calls.append((list(argv), dict(env) if env is not None else None))
        return self.exit_code

    @property
    def last_argv(self) -> list[str]:
        return self.calls[-1][0]


def make_settings(cwd: Path, path_dirs: list[str] | None = None,
                  tool_override: str | None = None,
                  extra_ghc_options: tuple[str, ...] = (),
                  log_path: str = "") -> Settings:
    return Settings(
        cwd=cwd,
        tool_override=tool_override,
        path_dirs=tuple(path_dirs or ()),
        log_path=log_path,
        extra_ghc_options=extra_ghc_options,
    )


def make_executable(directory: Path, name: str, body: str = "#!/bin/sh\nexit 0\n") -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_text(body)
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


def no_diagnostics(_settings) -> list:
    return []


def touch(directory: Path, name: str) -> Path:
    path = directory / name
    path.write_text("")
    return path
