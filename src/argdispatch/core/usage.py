from collections.abc import Mapping

from .dispatch import DEFAULT_COMMAND
from .schema import UNSET, CommandSchema, ParameterSchema


def _flag(name: str, param: ParameterSchema) -> str:
    text = "--" + name
    if param.shorthand is not None:
        text += ", -" + param.shorthand
    return f"{text} <{param.type.value}>"


def _default(param: ParameterSchema) -> str:
    if param.default is UNSET:
        return ""
    if param.default is None:
        return " (optional)"
    if isinstance(param.default, bool):
        return f" (default: {str(param.default).lower()})"
    return f" (default: {param.default})"


def usage_notes(registry: Mapping[str, CommandSchema], prog: str | None = None) -> str:
    """Describe the registered commands and their documented parameters."""

    if not registry:
        return ""

    prog = prog or "<program>"
    names = sorted(registry, key=lambda n: (n != DEFAULT_COMMAND, n))
    lines = [f"Usage: {prog} [command] [--name[=value] ...]", ""]

    for name in names:
        schema = registry[name]
        head = f"  {prog}" if name == DEFAULT_COMMAND else f"  {prog} {name}"
        lines.append(head + (f"  {schema.description}" if schema.description else ""))
        for pname, param in schema.parameters.items():
            if not param.description:
                continue
            lines.append(f"      {_flag(pname, param)}  {param.description}{_default(param)}")

    return "\n".join(lines)
