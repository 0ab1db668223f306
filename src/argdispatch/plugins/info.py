import click

from ..core.dispatch import REGISTRY, command
from ..core.usage import usage_notes


@command(
    "default",
    parameters={
        "verbose": {"type": "boolean", "shorthand": "v", "description": "Show parameters too"},
        "prog": {"type": "string", "default": None},
    },
)
def info(params: dict) -> list[str]:
    """List the available commands."""

    if params["verbose"]:
        click.echo(usage_notes(REGISTRY, params["prog"] or "argdispatch"))
        return sorted(REGISTRY)

    names = sorted(name for name in REGISTRY if name != "default")
    for name in names:
        click.echo(name)
    return names
