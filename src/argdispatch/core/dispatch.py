import logging
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from .errors import ErrorCode, InvalidCommandName, RegistrationError, UnknownCommand
from .resolver import resolve_parameters
from .schema import CommandSchema, Handler, ParameterSchema, ParameterValue
from .tokenizer import COMMAND_NAME_RE, is_argument, tokenize

logger = logging.getLogger(__name__)

DEFAULT_COMMAND = "default"
DEFAULT_OFFSET = 2


class CommandRegistry(Mapping[str, CommandSchema]):
    """Command name -> CommandSchema. Populate it once, then dispatch against it."""

    def __init__(self, commands: Sequence[CommandSchema] = ()) -> None:
        self._commands: dict[str, CommandSchema] = {}
        for schema in commands:
            self.register(schema)

    def __getitem__(self, name: str) -> CommandSchema:
        return self._commands[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._commands)

    def __len__(self) -> int:
        return len(self._commands)

    def register(self, schema: CommandSchema) -> CommandSchema:
        if schema.name in self._commands:
            prev = self._commands[schema.name]
            raise RegistrationError(
                f"Duplicate command '{schema.name}' registered by "
                f"{getattr(schema.handler, '__module__', 'unknown')}; already registered by "
                f"{getattr(prev.handler, '__module__', 'unknown')}",
                code=ErrorCode.E_PLUGIN_CONFLICT,
            )
        self._commands[schema.name] = schema
        return schema

    def command(
        self,
        name: str | None = None,
        *,
        parameters: Mapping[str, ParameterSchema | Mapping[str, Any]] | None = None,
        description: str | None = None,
    ):
        """Decorator to register a handler under ``name``.

        Args:
            name: Command name (defaults to the function name).
            parameters: Parameter schemas, or their dict declarations.
            description: Usage text (defaults to the first docstring line).
        """

        def decorate(fn: Handler) -> Handler:
            doc = (fn.__doc__ or "").strip()
            self.register(
                CommandSchema(
                    name=name or fn.__name__,
                    handler=fn,
                    parameters=dict(parameters or {}),
                    description=description or (doc.splitlines()[0].strip() if doc else None),
                )
            )
            return fn

        return decorate

    @classmethod
    def from_mapping(cls, configs: Mapping[str, Mapping[str, Any]]) -> "CommandRegistry":
        """Build a registry from ``{name: {"command": fn, "parameters": {...}}}``."""

        registry = cls()
        for name, config in configs.items():
            if "command" not in config:
                raise RegistrationError(f"{name}: missing 'command' handler")
            registry.register(
                CommandSchema(
                    name=name,
                    handler=config["command"],
                    parameters=dict(config.get("parameters", {})),
                    description=config.get("description"),
                )
            )
        return registry


REGISTRY = CommandRegistry()


def command(
    name: str | None = None,
    *,
    parameters: Mapping[str, ParameterSchema | Mapping[str, Any]] | None = None,
    description: str | None = None,
    registry: CommandRegistry | None = None,
):
    """Register a plugin handler into the shared registry."""

    target = registry if registry is not None else REGISTRY
    return target.command(name, parameters=parameters, description=description)


def resolve_command_name(
    argv: Sequence[str], offset: int = DEFAULT_OFFSET
) -> tuple[str, list[str]]:
    """Split ``argv`` into the command name and its arguments.

    Slots before ``offset`` are ignored. A missing first token, or one that
    already looks like an argument, selects the default command.
    """

    first = argv[offset] if len(argv) > offset else None

    if first is not None and COMMAND_NAME_RE.match(first):
        return first, list(argv[offset + 1 :])

    if first is None or is_argument(first):
        return DEFAULT_COMMAND, list(argv[offset:])

    raise InvalidCommandName(first)


@dataclass(frozen=True)
class Invocation:
    """A handler bound to its resolved parameters, not yet called."""

    command: str
    handler: Handler
    parameters: Mapping[str, ParameterValue | None] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "parameters", MappingProxyType(dict(self.parameters)))

    def invoke(self) -> Any:
        logger.debug("invoking %s with %r", self.command, dict(self.parameters))
        return self.handler(dict(self.parameters))

    __call__ = invoke


class Dispatcher:
    def __init__(self, registry: Mapping[str, CommandSchema], *, offset: int = DEFAULT_OFFSET) -> None:
        self.registry = registry
        self.offset = offset

    def lookup(self, name: str) -> CommandSchema:
        schema = self.registry.get(name)
        if schema is None:
            raise UnknownCommand(name)
        return schema

    def resolve(self, argv: Sequence[str]) -> Invocation:
        """Parse and validate ``argv`` without running anything."""

        name, arguments = resolve_command_name(argv, self.offset)
        logger.debug("resolved command %s", name)
        schema = self.lookup(name)

        raw = tokenize(arguments)
        logger.debug("raw arguments for %s: %r", name, raw)

        parameters = resolve_parameters(schema.parameters, raw)
        return Invocation(command=name, handler=schema.handler, parameters=parameters)

    def invoke(self, argv: Sequence[str]) -> Any:
        return self.resolve(argv).invoke()
