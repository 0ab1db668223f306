from argdispatch.core.dispatch import CommandRegistry
from argdispatch.core.usage import usage_notes


def test_empty_registry_has_no_usage() -> None:
    assert usage_notes(CommandRegistry()) == ""


def test_usage_lists_commands_and_documented_parameters(registry: CommandRegistry) -> None:
    text = usage_notes(registry, "tool")
    lines = text.splitlines()

    assert lines[0] == "Usage: tool [command] [--name[=value] ...]"
    assert lines[2] == "  tool"
    assert "  tool greet  Say hello" in lines
    assert "      --name <string>  Who to greet" in lines
    # undocumented parameters are not listed
    assert "--loud" not in text
    assert "--count" not in text


def test_usage_shows_shorthand_and_defaults() -> None:
    registry = CommandRegistry.from_mapping(
        {
            "run": {
                "command": print,
                "parameters": {
                    "fast": {"type": "boolean", "shorthand": "f", "default": True, "description": "Go"},
                    "tag": {"type": "string", "default": None, "description": "Label"},
                },
            }
        }
    )
    text = usage_notes(registry)
    assert "--fast, -f <boolean>  Go (default: true)" in text
    assert "--tag <string>  Label (optional)" in text
    assert text.startswith("Usage: <program>")
