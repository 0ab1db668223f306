from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Final

from .errors import RegistrationError
from .tokenizer import ARGUMENT_NAME_RE, COMMAND_NAME_RE

ParameterValue = bool | int | float | str
Handler = Callable[[dict[str, Any]], Any]


class _Unset:
    _instance: "_Unset | None" = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Final = _Unset()


class ParameterType(str, Enum):
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"

    def accepts(self, value: Any) -> bool:
        if self is ParameterType.BOOLEAN:
            return isinstance(value, bool)
        if self is ParameterType.NUMBER:
            return isinstance(value, (int, float)) and not isinstance(value, bool)
        return isinstance(value, str)


@dataclass(frozen=True)
class ParameterSchema:
    """Declared shape of one command parameter.

    ``default`` is ``UNSET`` when the parameter has no default, and ``None``
    when the parameter is optional and resolves to ``None`` if omitted.
    """

    type: ParameterType
    default: ParameterValue | None | _Unset = UNSET
    shorthand: str | None = None
    description: str | None = None

    def __post_init__(self) -> None:
        try:
            object.__setattr__(self, "type", ParameterType(self.type))
        except ValueError:
            raise RegistrationError(f"Unsupported parameter type: {self.type!r}") from None

        if self.default is not UNSET and self.default is not None and not self.type.accepts(self.default):
            raise RegistrationError(
                f"Default {self.default!r} does not match parameter type {self.type.value}"
            )
        if self.shorthand is not None and not ARGUMENT_NAME_RE.match(self.shorthand):
            raise RegistrationError(f"Invalid shorthand: {self.shorthand!r}")

    @property
    def optional(self) -> bool:
        return self.default is not UNSET

    @classmethod
    def from_mapping(cls, spec: Mapping[str, Any]) -> "ParameterSchema":
        if "type" not in spec:
            raise RegistrationError("Parameter declaration is missing 'type'")
        return cls(
            type=spec["type"],
            default=spec.get("default", UNSET),
            shorthand=spec.get("shorthand"),
            description=spec.get("description"),
        )


@dataclass(frozen=True)
class CommandSchema:
    name: str
    handler: Handler
    parameters: Mapping[str, ParameterSchema] = field(default_factory=dict)
    description: str | None = None

    def __post_init__(self) -> None:
        if not COMMAND_NAME_RE.match(self.name):
            raise RegistrationError(f"Invalid command name: {self.name!r}")
        if not callable(self.handler):
            raise RegistrationError(f"{self.name}: handler is not callable")

        parameters: dict[str, ParameterSchema] = {}
        for pname, param in self.parameters.items():
            if not ARGUMENT_NAME_RE.match(pname):
                raise RegistrationError(f"{self.name}: invalid parameter name {pname!r}")
            if isinstance(param, Mapping):
                param = ParameterSchema.from_mapping(param)
            parameters[pname] = param

        seen: dict[str, str] = {}
        for pname, param in parameters.items():
            if param.shorthand is None:
                continue
            if param.shorthand in seen:
                raise RegistrationError(
                    f"{self.name}: shorthand -{param.shorthand} used by both "
                    f"{seen[param.shorthand]} and {pname}"
                )
            if param.shorthand in parameters and param.shorthand != pname:
                raise RegistrationError(
                    f"{self.name}: shorthand -{param.shorthand} of {pname} shadows a parameter name"
                )
            seen[param.shorthand] = pname

        object.__setattr__(self, "parameters", MappingProxyType(parameters))
