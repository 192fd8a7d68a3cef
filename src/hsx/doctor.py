# Copyright 2026. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Backend diagnostics — are cabal, stack and ghcid installed and recent enough."""

import re
import shutil
import subprocess
from dataclasses import dataclass

from hsx.core.config import Settings
from hsx.dispatch.recipes import RELOAD_DRIVER
from hsx.dispatch.selector import Tool

MINIMUM_VERSIONS = {
    Tool.CABAL.value: (3, 0),
    Tool.STACK.value: (2, 1),
    RELOAD_DRIVER: (0, 8),
}

PROBE_TIMEOUT_S = 10

_VERSION_RE = re.compile(r"\d+(?:\.\d+)*")


@dataclass
class Diagnostic:
    name: str
    status: str
    minimum: tuple[int, ...]
    path: str | None = None
    version: tuple[int, ...] | None = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"


def format_version(version: tuple[int, ...]) -> str:
    return ".".join(str(n) for n in version)


def parse_version(text: str) -> tuple[int, ...] | None:
    match = _VERSION_RE.search(text or "")
    if not match:
        return None
    return tuple(int(part) for part in match.group(0).split("."))


def check_tool(name: str, minimum: tuple[int, ...], search_path: str,
               runner=subprocess.run) -> Diagnostic:
    """Locate ``name`` on ``search_path`` and compare its version to ``minimum``.

    Probe failures become an ``unknown`` status rather than an exception.
    """
    path = shutil.which(name, path=search_path) if search_path else None
    if not path:
        return Diagnostic(name=name, status="missing", minimum=minimum)

    try:
        result = runner(
            [path, "--numeric-version"],
            capture_output=True, text=True, timeout=PROBE_TIMEOUT_S,
        )
    except (subprocess.TimeoutExpired, OSError):
        return Diagnostic(name=name, status="unknown", minimum=minimum, path=path)

    version = parse_version(result.stdout) if result.returncode == 0 else None
    if version is None:
        return Diagnostic(name=name, status="unknown", minimum=minimum, path=path)
    status = "ok" if version >= minimum else "outdated"
    return Diagnostic(name=name, status=status, minimum=minimum, path=path, version=version)


def run_diagnostics(settings: Settings, runner=subprocess.run) -> list[Diagnostic]:
    return [
        check_tool(name, minimum, settings.search_path, runner=runner)
        for name, minimum in MINIMUM_VERSIONS.items()
    ]


def describe(diag: Diagnostic) -> str:
    minimum = format_version(diag.minimum)
    if diag.status == "missing":
        return f"warning: {diag.name} not found on PATH (need >= {minimum})"
    if diag.status == "unknown":
        return f"warning: {diag.name} at {diag.path}: could not determine version (need >= {minimum})"
    version = format_version(diag.version)
    if diag.status == "outdated":
        return f"warning: {diag.name} {version} at {diag.path} is older than {minimum}"
    return f"{diag.name} {version} at {diag.path}"
