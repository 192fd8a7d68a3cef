# Copyright 2026. Activity logging for dispatch decisions.

import os
import shlex
from collections.abc import Sequence
from datetime import datetime, timezone


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).strftime("%H:%M:%S")


def log_activity(log_path: str, source: str, message: str) -> None:
    if not log_path:
        return
    ts = utc_timestamp()
    prefix = f"[{ts}] pid={os.getpid()}"
    line = f"{prefix} {source}  {message}\n" if source else f"{prefix} {message}\n"
    try:
        with open(log_path, "a") as f:
            f.write(line)
    except OSError:
        pass


def log_command(log_path: str, source: str, label: str, argv: Sequence[str]) -> None:
    """Log ``argv`` as a shell-quoted line that can be pasted back into a terminal."""
    log_activity(log_path, source, f"{label}: {shlex.join(argv)}")
