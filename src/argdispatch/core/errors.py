from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Stable numeric error catalog."""

    OK = 0

    # 10xx: command selection
    E_COMMAND_INVALID = 1001
    E_COMMAND_UNKNOWN = 1002

    # 11xx: arguments
    E_ARGUMENT_MALFORMED = 1101
    E_ARGUMENT_TYPE = 1102
    E_ARGUMENT_INVALID = 1103

    # 2xxx: registration
    E_SCHEMA_INVALID = 2001
    E_PLUGIN_CONFLICT = 2002

    # 9xxx: handler
    E_HANDLER_FAILED = 9001


class DispatchError(Exception):
    """Raised before a handler runs: the command line could not be resolved."""

    code: ErrorCode = ErrorCode.E_ARGUMENT_INVALID

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidCommandName(DispatchError):
    code = ErrorCode.E_COMMAND_INVALID

    def __init__(self, token: str) -> None:
        super().__init__(f"Invalid command name: {token}", details={"token": token})
        self.token = token


class UnknownCommand(DispatchError):
    code = ErrorCode.E_COMMAND_UNKNOWN

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown command: {name}", details={"command": name})
        self.name = name


class MalformedArgument(DispatchError):
    code = ErrorCode.E_ARGUMENT_MALFORMED

    def __init__(self, token: str) -> None:
        super().__init__(f"Invalid argument: {token}", details={"token": token})
        self.token = token


class TypeConversionError(DispatchError, ValueError):
    code = ErrorCode.E_ARGUMENT_TYPE

    def __init__(self, parameter: str, type_name: str, raw: str) -> None:
        super().__init__(
            f"Invalid {type_name} value provided for parameter {parameter}: {raw}",
            details={"parameter": parameter, "type": type_name, "value": raw},
        )
        self.parameter = parameter
        self.raw = raw


class ValidationError(DispatchError):
    """Missing and unknown arguments, reported together."""

    code = ErrorCode.E_ARGUMENT_INVALID

    def __init__(self, missing: list[str], unknown: list[str]) -> None:
        parts = []
        if missing:
            parts.append("Missing arguments: " + ", ".join(missing))
        if unknown:
            parts.append("Unknown arguments: " + ", ".join(unknown))
        super().__init__(
            ". ".join(parts),
            details={"missing": list(missing), "unknown": list(unknown)},
        )
        self.missing = tuple(missing)
        self.unknown = tuple(unknown)


class RegistrationError(RuntimeError):
    """A command or parameter declaration is unusable."""

    def __init__(self, message: str, *, code: ErrorCode = ErrorCode.E_SCHEMA_INVALID) -> None:
        super().__init__(message)
        self.code = code
