from typing import Any

import pytest

from argdispatch.core.dispatch import CommandRegistry


def echo(params: dict[str, Any]) -> dict[str, Any]:
    return params


@pytest.fixture
def registry() -> CommandRegistry:
    return CommandRegistry.from_mapping(
        {
            "default": {
                "command": echo,
                "parameters": {"count": {"type": "number", "default": 0}},
            },
            "greet": {
                "command": echo,
                "description": "Say hello",
                "parameters": {
                    "name": {"type": "string", "description": "Who to greet"},
                    "loud": {"type": "boolean", "shorthand": "l"},
                },
            },
            "age": {
                "command": echo,
                "parameters": {"age": {"type": "number"}},
            },
        }
    )
