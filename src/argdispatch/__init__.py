from .core.dispatch import (
    DEFAULT_COMMAND,
    CommandRegistry,
    Dispatcher,
    Invocation,
    command,
    resolve_command_name,
)
from .core.errors import (
    DispatchError,
    ErrorCode,
    InvalidCommandName,
    MalformedArgument,
    RegistrationError,
    TypeConversionError,
    UnknownCommand,
    ValidationError,
)
from .core.resolver import coerce, resolve_parameters
from .core.runner import execute, run
from .core.schema import UNSET, CommandSchema, ParameterSchema, ParameterType
from .core.tokenizer import tokenize
from .core.usage import usage_notes

__all__ = [
    "DEFAULT_COMMAND",
    "UNSET",
    "CommandRegistry",
    "CommandSchema",
    "DispatchError",
    "Dispatcher",
    "ErrorCode",
    "InvalidCommandName",
    "Invocation",
    "MalformedArgument",
    "ParameterSchema",
    "ParameterType",
    "RegistrationError",
    "TypeConversionError",
    "UnknownCommand",
    "ValidationError",
    "coerce",
    "command",
    "execute",
    "resolve_command_name",
    "resolve_parameters",
    "run",
    "tokenize",
    "usage_notes",
]
