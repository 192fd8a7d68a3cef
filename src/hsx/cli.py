# Copyright 2026. Unified CLI entry point for hsx.

import os
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from hsx.core.config import Settings
from hsx.dispatch.dispatcher import dispatch
from hsx.providers.process import ProcessDelegate


def _version() -> str:
    try:
        return version("hsx")
    except PackageNotFoundError:
        return "unknown"


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv

    # Only an exact --version is ours; every other first word is a verb.
    if args == ["--version"]:
        print(f"hsx {_version()}")
        return 0

    settings = Settings.from_env(os.environ, Path.cwd())
    return dispatch(args, settings, ProcessDelegate(), environ=os.environ)


if __name__ == "__main__":
    sys.exit(main())
