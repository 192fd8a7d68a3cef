# Copyright 2026. Backend tool selection from override or project markers.

import enum

from hsx.core.config import Settings


class Tool(str, enum.Enum):
    CABAL = "cabal"
    STACK = "stack"


CABAL_PROJECT = "cabal.project"
STACK_PROJECT = "stack.yaml"
PACKAGE_GLOB = "*.cabal"

# Checked in order; the first marker present decides.
_MARKERS = (
    (CABAL_PROJECT, Tool.CABAL),
    (STACK_PROJECT, Tool.STACK),
)


def has_package_descriptor(settings: Settings) -> bool:
    """Return True if the working directory holds a visible ``*.cabal`` file.

    Directories such as ``~/.cabal`` do not count.
    """
    return any(
        p.is_file() and not p.name.startswith(".")
        for p in settings.cwd.glob(PACKAGE_GLOB)
    )


def select_tool(settings: Settings) -> Tool | str:
    """Pick the backend for this run.

    An ``HSX_TOOL`` override wins and is returned as given, even when it
    names no known tool. Otherwise the project markers decide, and a
    directory with no markers at all falls back to stack, whose global
    project needs no local file.
    """
    if settings.tool_override:
        return settings.tool_override
    for marker, tool in _MARKERS:
        if (settings.cwd / marker).is_file():
            return tool
    if has_package_descriptor(settings):
        return Tool.CABAL
    return Tool.STACK


def tool_name(tool: Tool | str) -> str:
    return tool.value if isinstance(tool, Tool) else tool
