import json
import sys
from collections.abc import Mapping, Sequence
from typing import Any

import click

from .dispatch import DEFAULT_OFFSET, Dispatcher
from .errors import DispatchError, ErrorCode
from .results import ResultObject
from .schema import CommandSchema
from .usage import usage_notes

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_SOFTWARE = 70
EXIT_INTERRUPTED = 130


def _render(results: ResultObject, *, output: str, usage: str = "") -> None:
    if output == "json":
        click.echo(json.dumps(results.to_payload(), default=str), err=True)
        return

    for ev in results.events:
        kind = ev.get("kind", "event")
        code = ev.get("code")
        code_num = ev.get("code_num")
        code_part = f" ({code}:{code_num})" if code or code_num is not None else ""
        msg = ev.get("message")
        details_map = ev.get("details", {})
        tail = " ".join(
            f"{k}={','.join(map(str, v)) if isinstance(v, list) else v}"
            for k, v in details_map.items()
        )
        line = f"[{kind}]" + code_part + (f" {msg}" if msg else "") + (f" {tail}" if tail else "")
        click.echo(line, err=True)
    if usage:
        click.echo(usage, err=True)


def _exit_code(results: ResultObject) -> int:
    if results.ok:
        return EXIT_OK

    # 1xxx-2xxx: command line / registration -> 1
    # 9xxx: handler -> 70
    codes = results.error_codes
    if any(n >= int(ErrorCode.E_HANDLER_FAILED) for n in codes):
        return EXIT_SOFTWARE
    return EXIT_USAGE


def execute(
    registry: Mapping[str, CommandSchema],
    argv: Sequence[str],
    *,
    offset: int = DEFAULT_OFFSET,
) -> tuple[ResultObject, int]:
    """Programmatic entry point returning the structured outcome and exit code."""

    results = ResultObject()
    dispatcher = Dispatcher(registry, offset=offset)

    try:
        invocation = dispatcher.resolve(argv)
    except DispatchError as exc:
        results.reject(exc)
        return results, _exit_code(results)

    results.command = invocation.command
    try:
        results.value = invocation.invoke()
    except KeyboardInterrupt:
        raise SystemExit(EXIT_INTERRUPTED) from None
    except Exception as exc:
        results.crash(exc)

    return results, _exit_code(results)


def run(
    registry: Mapping[str, CommandSchema],
    argv: Sequence[str] | None = None,
    *,
    offset: int | None = None,
    output: str = "text",
    prog: str | None = None,
) -> Any:
    """Dispatch ``argv`` (``sys.argv`` by default) and return the handler's result.

    Failures are printed to stderr and end the process: parsing errors with
    the usage notes and exit status 1, handler errors with status 70.
    """

    if argv is None:
        argv = sys.argv
        offset = 1 if offset is None else offset
    if offset is None:
        offset = DEFAULT_OFFSET

    results, code = execute(registry, argv, offset=offset)
    if code == EXIT_OK:
        return results.value

    report(results, code, registry, output=output, prog=prog)
    raise SystemExit(code)


def report(
    results: ResultObject,
    code: int,
    registry: Mapping[str, CommandSchema],
    *,
    output: str = "text",
    prog: str | None = None,
) -> None:
    """Print a failed outcome; usage notes accompany command line errors only."""

    if code == EXIT_OK:
        return
    usage = usage_notes(registry, prog) if code == EXIT_USAGE else ""
    _render(results, output=output, usage=usage)
