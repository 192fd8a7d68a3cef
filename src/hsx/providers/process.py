# Copyright 2026. Process delegate — replace hsx with the delegated program.

import os
import sys
from collections.abc import Mapping, Sequence

COMMAND_NOT_FOUND = 127
NOT_EXECUTABLE = 126


class ProcessDelegate:
    """Replace the current process image with ``argv``.

    The child keeps hsx's pid, so its exit status is hsx's exit status and
    signals sent to hsx reach it directly. ``exec`` only returns when the
    program could not be started.
    """

    def exec(self, argv: Sequence[str], env: Mapping[str, str] | None = None) -> int:
        args = list(argv)
        sys.stdout.flush()
        sys.stderr.flush()
        try:
            if env is None:
                os.execvp(args[0], args)
            else:
                os.execvpe(args[0], args, dict(env))
        except FileNotFoundError:
            print(f"hsx: {args[0]}: command not found", file=sys.stderr)
            return COMMAND_NOT_FOUND
        except PermissionError:
            print(f"hsx: {args[0]}: permission denied", file=sys.stderr)
            return NOT_EXECUTABLE
        except OSError as e:
            print(f"hsx: {args[0]}: {e.strerror or e}", file=sys.stderr)
            return NOT_EXECUTABLE
        return 0
