import os
import sys

from .core.dispatch import REGISTRY
from .core.plugins import load_plugins
from .core.results import ResultObject
from .core.runner import execute, report

OUTPUT_ENV = "ARGDISPATCH_OUTPUT"


def run(argv: list[str] | None = None) -> tuple[ResultObject, int]:
    """Programmatic entry point returning structured results and exit code."""

    argv = argv if argv is not None else sys.argv[1:]

    pkg = __package__ or __name__.split(".")[0]
    load_plugins(f"{pkg}.plugins")
    return execute(REGISTRY, argv, offset=0)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for the bundled demo commands."""

    pkg = __package__ or __name__.split(".")[0]
    output = os.environ.get(OUTPUT_ENV, "text").lower()
    results, code = run(argv)
    report(results, code, REGISTRY, output=output, prog=pkg)
    return code


if __name__ == "__main__":
    raise SystemExit(main())
