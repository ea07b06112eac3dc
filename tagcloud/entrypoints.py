from __future__ import annotations

import sys


def _run(subcommand: str) -> None:
    from .cli import app

    argv0 = sys.argv[0]
    sys.argv = [argv0, subcommand, *sys.argv[1:]]
    app()


def main() -> None:
    from .cli import app

    app()


def generate_main() -> None:
    _run("generate")


def prompt_main() -> None:
    _run("prompt")
