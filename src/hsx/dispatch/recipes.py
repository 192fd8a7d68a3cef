# Copyright 2026. Command table — builtin verbs and their per-tool recipes.

import shlex
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from hsx.dispatch.selector import CABAL_PROJECT, PACKAGE_GLOB, STACK_PROJECT, Tool

WARNING_FLAGS = (
    "-Wall",
    "-Wcompat",
    "-Widentities",
    "-Wincomplete-record-updates",
    "-Wincomplete-uni-patterns",
    "-Wpartial-fields",
    "-Wredundant-constraints",
)

FREEZE_FILE = f"{CABAL_PROJECT}.freeze"

RELOAD_DRIVER = "ghcid"
RELOAD_ENTRY_POINT = "main"

RESTART_GLOBS = {
    Tool.CABAL: (PACKAGE_GLOB, CABAL_PROJECT, f"{CABAL_PROJECT}.local"),
    Tool.STACK: (PACKAGE_GLOB, "package.yaml", STACK_PROJECT),
}

BUILTIN_VERBS = (
    "bench", "build", "dev", "dev-run", "release", "exec",
    "freeze", "test", "repl", "run", "unfreeze",
)


@dataclass(frozen=True)
class Recipe:
    tokens: tuple[str, ...]

    @property
    def binary(self) -> str:
        return self.tokens[0]

    def argv(self, forwarded: Sequence[str] = ()) -> list[str]:
        return [*self.tokens, *forwarded]


@dataclass(frozen=True)
class Command:
    verb: str
    description: str
    recipes: Mapping[str, Recipe] = field(default_factory=dict)

    def recipe_for(self, tool: Tool | str) -> Recipe | None:
        return self.recipes.get(tool)


def _cabal(*tokens: str) -> Recipe:
    return Recipe(("cabal", *tokens))


def _stack(*tokens: str) -> Recipe:
    return Recipe(("stack", *tokens))


def _reload(repl: Recipe, tool: Tool, run_main: bool = False) -> Recipe:
    tokens = [RELOAD_DRIVER, f"--command={shlex.join(repl.tokens)}"]
    tokens += [f"--restart={glob}" for glob in RESTART_GLOBS[tool]]
    if run_main:
        tokens.append(f"--run={RELOAD_ENTRY_POINT}")
    return Recipe(tuple(tokens))


def build_table(extra_ghc_options: Sequence[str] = ()) -> dict[str, Command]:
    """Build the verb -> Command table for one invocation.

    cabal takes the diagnostic bundle as a single ``--ghc-options=`` token and
    selects optimisation with ``-O``; stack takes ``--ghc-options`` (or
    ``--ghci-options`` for ghci) as a separate string and uses ``--fast``
    for unoptimised builds. A verb missing a tool's key has no recipe there.
    """
    bundle = " ".join([*WARNING_FLAGS, *extra_ghc_options])
    cabal_opts = f"--ghc-options={bundle}"

    cabal_repl = _cabal("repl", "-O0", cabal_opts)
    stack_repl = _stack("ghci", "--ghci-options", bundle)

    commands = [
        Command("bench", "Build and run benchmarks", {
            Tool.CABAL: _cabal("bench", "--jobs", "-O2", cabal_opts),
            Tool.STACK: _stack("bench", "--ghc-options", bundle),
        }),
        Command("build", "Build the project without optimisation", {
            Tool.CABAL: _cabal("build", "--jobs", "-O0", cabal_opts),
            Tool.STACK: _stack("build", "--fast", "--ghc-options", bundle),
        }),
        Command("dev", "Reload a REPL whenever sources change", {
            Tool.CABAL: _reload(cabal_repl, Tool.CABAL),
            Tool.STACK: _reload(stack_repl, Tool.STACK),
        }),
        Command("dev-run", "Like dev, and run main after every reload", {
            Tool.CABAL: _reload(cabal_repl, Tool.CABAL, run_main=True),
            Tool.STACK: _reload(stack_repl, Tool.STACK, run_main=True),
        }),
        Command("release", "Build the project with full optimisation", {
            Tool.CABAL: _cabal("build", "--jobs", "-O2", cabal_opts),
            Tool.STACK: _stack("build", "--ghc-options", f"-O2 {bundle}"),
        }),
        Command("exec", "Run a command inside the project environment", {
            Tool.CABAL: _cabal("exec", "--"),
            Tool.STACK: _stack("exec", "--"),
        }),
        Command("freeze", "Pin dependency versions (cabal only)", {
            Tool.CABAL: _cabal("freeze"),
        }),
        Command("test", "Build and run the test suites", {
            Tool.CABAL: _cabal("test", "--jobs", "-O0", "--test-show-details=direct", cabal_opts),
            Tool.STACK: _stack("test", "--fast", "--ghc-options", bundle),
        }),
        Command("repl", "Start an interactive REPL", {
            Tool.CABAL: cabal_repl,
            Tool.STACK: stack_repl,
        }),
        Command("run", "Build and run an executable", {
            Tool.CABAL: _cabal("run", "-v0", "-O0", cabal_opts),
            Tool.STACK: _stack("run", "--fast", "--ghc-options", bundle),
        }),
        Command("unfreeze", "Remove pinned dependency versions (cabal only)", {
            Tool.CABAL: Recipe(("rm", "-f", FREEZE_FILE)),
        }),
    ]
    return {c.verb: c for c in commands}
