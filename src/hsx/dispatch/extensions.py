# Copyright 2026. Extension verbs — executables named hsx-<verb> on PATH.

import os
import shutil
from collections.abc import Iterable

PathSnapshot = list[tuple[str, list[str]]]


def _is_executable(path: str) -> bool:
    return os.path.isfile(path) and os.access(path, os.X_OK)


def snapshot_path(path_dirs: Iterable[str]) -> PathSnapshot:
    """List the executables in each PATH directory, in PATH order.

    Missing or unreadable directories are skipped.
    """
    snapshot: PathSnapshot = []
    for d in path_dirs:
        try:
            names = sorted(os.listdir(d))
        except OSError:
            continue
        snapshot.append((d, [n for n in names if _is_executable(os.path.join(d, n))]))
    return snapshot


def discover(snapshot: PathSnapshot, prefix: str) -> set[str]:
    verbs: set[str] = set()
    for _directory, names in snapshot:
        for name in names:
            if name.startswith(prefix) and len(name) > len(prefix):
                verbs.add(name[len(prefix):])
    return verbs


def find_extension(verb: str, path_dirs: Iterable[str], prefix: str) -> str | None:
    """Return the path of the first ``<prefix><verb>`` executable, or None."""
    if not verb or os.sep in verb:
        return None
    search = os.pathsep.join(path_dirs)
    if not search:
        return None
    return shutil.which(prefix + verb, path=search)
