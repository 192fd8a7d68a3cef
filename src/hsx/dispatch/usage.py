# Copyright 2026. Usage text — builtin verbs, extension verbs, tool diagnostics.

from collections.abc import Iterable, Mapping

from hsx.core.config import EXTENSION_PREFIX
from hsx.dispatch.recipes import BUILTIN_VERBS, Command
from hsx.doctor import Diagnostic, describe


def render_usage(table: Mapping[str, Command], extensions: Iterable[str],
                 diagnostics: Iterable[Diagnostic]) -> str:
    lines = ["usage: hsx VERB [ARGS...]", "", "Builtin verbs:"]
    width = max(len(v) for v in BUILTIN_VERBS)
    for verb in BUILTIN_VERBS:
        lines.append(f"  {verb.ljust(width)}  {table[verb].description}")

    lines += ["", f"Extension verbs ({EXTENSION_PREFIX}VERB on PATH):"]
    found = sorted(set(extensions))
    if found:
        lines += [f"  {verb}" for verb in found]
    else:
        lines.append("  (none found)")

    diagnostics = list(diagnostics)
    if diagnostics:
        lines += ["", "Tools:"]
        lines += [f"  {describe(d)}" for d in diagnostics]
    return "\n".join(lines) + "\n"
