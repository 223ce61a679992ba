"""
Argv preprocessor for forgiving CLI flag and command handling.

Normalizes sys.argv before Typer parses it, handling common user patterns:
- ``obsidian-tasks --version`` → ``obsidian-tasks version``
- ``obsidian-tasks help count`` → ``obsidian-tasks count --help``
- ``obsidian-tasks today --path ~/vault`` → ``obsidian-tasks --path ~/vault today``
"""

_GLOBAL_FLAGS = {"--debug"}
_GLOBAL_OPTIONS = {"--path", "-p"}


def preprocess_argv(argv: list[str]) -> list[str]:
    """Normalize CLI arguments for Typer compatibility.

    Applied rules (in order):
    1. ``--version`` / ``-V`` as first arg → ``version`` subcommand
    2. ``help`` pseudo-command → ``--help`` appended to the subcommand
    3. Global flags and ``--path`` hoisted before the subcommand
    """
    if not argv:
        return argv

    # Rule 1: --version / -V at top level → version subcommand
    if argv[0] in ("--version", "-V"):
        return ["version"]

    # Rule 2: help pseudo-command → --help
    if argv[0] == "help":
        return _rewrite_help(argv[1:])

    # Rule 3: hoist global flags
    return _hoist_global_options(argv)


def _rewrite_help(rest: list[str]) -> list[str]:
    """Rewrite ``help [subcmd]`` into ``[subcmd] --help``."""
    for token in rest:
        if token.startswith("-") or token == "help":
            continue
        return [token, "--help"]
    return ["--help"]


def _hoist_global_options(argv: list[str]) -> list[str]:
    """Move ``--debug`` and ``--path VALUE`` before the subcommand.

    A value-taking option keeps its value next to it. The last ``--path``
    wins, matching Click's own behavior for repeated options.
    """
    hoisted: list[str] = []
    path_args: list[str] = []
    rest: list[str] = []
    seen: set[str] = set()

    i = 0
    while i < len(argv):
        token = argv[i]
        if token == "--":
            rest.extend(argv[i:])
            break
        if token in _GLOBAL_FLAGS:
            if token not in seen:
                hoisted.append(token)
                seen.add(token)
        elif token in _GLOBAL_OPTIONS and i + 1 < len(argv):
            path_args = [token, argv[i + 1]]
            i += 1
        elif token.startswith("--path="):
            path_args = [token]
        else:
            rest.append(token)
        i += 1

    return [*hoisted, *path_args, *rest]
