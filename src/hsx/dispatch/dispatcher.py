# Copyright 2026. Dispatcher — route a verb to a tool recipe or an extension.

import os
import sys
from collections.abc import Callable, Mapping, Sequence

from hsx.core.config import EXTENSION_PREFIX, TOOL_ENV, Settings
from hsx.core.logging import log_activity, log_command
from hsx.dispatch.extensions import discover, find_extension, snapshot_path
from hsx.dispatch.recipes import build_table
from hsx.dispatch.selector import select_tool, tool_name
from hsx.dispatch.usage import render_usage
from hsx.doctor import Diagnostic, run_diagnostics
from hsx.providers.protocol import Delegate

UNSUPPORTED = 1


def print_usage(settings: Settings,
                diagnose: Callable[[Settings], list[Diagnostic]] = run_diagnostics) -> int:
    table = build_table(settings.extra_ghc_options)
    extensions = discover(snapshot_path(settings.path_dirs), EXTENSION_PREFIX)
    print(render_usage(table, extensions, diagnose(settings)), end="")
    return 0


def dispatch(argv: Sequence[str], settings: Settings, delegate: Delegate,
             environ: Mapping[str, str] | None = None,
             diagnose: Callable[[Settings], list[Diagnostic]] = run_diagnostics) -> int:
    """Run one hsx invocation and return its exit status.

    ``argv`` excludes the program name. Everything after the verb is
    forwarded untouched. ``environ`` (default: the current environment) is
    handed to extension commands with the selected tool added as ``HSX_TOOL``.
    """
    if not argv:
        return print_usage(settings, diagnose)

    verb, rest = argv[0], list(argv[1:])
    table = build_table(settings.extra_ghc_options)
    tool = select_tool(settings)
    name = tool_name(tool)

    command = table.get(verb)
    if command is not None:
        recipe = command.recipe_for(tool)
        if recipe is None:
            log_activity(settings.log_path, "dispatch", f"{verb}: no recipe for {name}")
            print(f"hsx: '{verb}' is not supported with {name}", file=sys.stderr)
            return UNSUPPORTED
        args = recipe.argv(rest)
        log_command(settings.log_path, "dispatch", f"{verb} via {name}", args)
        return delegate.exec(args)

    path = find_extension(verb, settings.path_dirs, EXTENSION_PREFIX)
    if path is None:
        log_activity(settings.log_path, "extension", f"{EXTENSION_PREFIX}{verb} not found")
        return print_usage(settings, diagnose)

    env = {**(os.environ if environ is None else environ), TOOL_ENV: name}
    log_command(settings.log_path, "extension", verb, [path, *rest])
    return delegate.exec([path, *rest], env=env)
