import click

from ..core.dispatch import command


@command(
    parameters={
        "name": {"type": "string", "shorthand": "n", "description": "Who to greet"},
        "loud": {"type": "boolean", "shorthand": "l", "description": "Shout the greeting"},
        "times": {"type": "number", "default": 1, "description": "How many times"},
    }
)
def greet(params: dict) -> str:
    """Print a greeting."""

    text = f"Hello, {params['name']}!"
    if params["loud"]:
        text = text.upper()
    for _ in range(int(params["times"])):
        click.echo(text)
    return text
