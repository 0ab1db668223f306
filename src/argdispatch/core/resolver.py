"""Resolve raw command line values against a command's parameter schema."""

import logging
import re
from collections.abc import Mapping
from typing import Any

from .errors import TypeConversionError, ValidationError
from .schema import UNSET, ParameterSchema, ParameterType, ParameterValue
from .tokenizer import RawArguments

logger = logging.getLogger(__name__)

TRUE_VALUES = frozenset({"true", "yes", "y", "on", "1"})
FALSE_VALUES = frozenset({"false", "no", "n", "off", "0"})

# ASCII numeric literals only.
INTEGER_RE = re.compile(r"[+-]?[0-9]+")
PREFIXED_RE = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")
DECIMAL_RE = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|[+-]?(?:inf|infinity)",
    re.IGNORECASE,
)


def _to_number(raw: str) -> int | float | None:
    text = raw.strip()
    if INTEGER_RE.fullmatch(text):
        return int(text)
    if PREFIXED_RE.fullmatch(text):
        return int(text, 0)
    if DECIMAL_RE.fullmatch(text):
        return float(text)
    return None


def coerce(name: str, param_type: ParameterType, raw: str) -> ParameterValue:
    """Convert ``raw`` to ``param_type`` or raise TypeConversionError."""

    if param_type is ParameterType.BOOLEAN:
        lowered = raw.lower()
        if lowered in TRUE_VALUES:
            return True
        if lowered in FALSE_VALUES:
            return False
        raise TypeConversionError(name, "boolean", raw)

    if param_type is ParameterType.NUMBER:
        number = _to_number(raw)
        if number is None:
            raise TypeConversionError(name, "numeric", raw)
        return number

    return raw


def expand_shorthands(
    parameters: Mapping[str, ParameterSchema], raw: RawArguments
) -> RawArguments:
    """Rename shorthand keys to their parameter names.

    When both ``-s`` and the long name were given, the long name wins.
    """

    aliases = {
        param.shorthand: pname
        for pname, param in parameters.items()
        if param.shorthand is not None
    }
    expanded: RawArguments = {}
    for key, value in raw.items():
        if key in parameters or key not in aliases:
            expanded[key] = value
    for key, value in raw.items():
        canonical = aliases.get(key)
        if canonical is None or key in parameters:
            continue
        if canonical in raw:
            logger.debug("ignoring -%s, --%s was also given", key, canonical)
            continue
        expanded[canonical] = value
    return expanded


def resolve_parameters(
    parameters: Mapping[str, ParameterSchema], raw: RawArguments
) -> dict[str, ParameterValue | None]:
    """Build the typed parameter mapping handed to a handler.

    Conversion errors stop at the first offending parameter. Missing and
    unknown names are collected in full and raised as one ValidationError.
    """

    raw = expand_shorthands(parameters, raw)
    values: dict[str, Any] = {}
    missing: list[str] = []

    for name, param in parameters.items():
        value: Any = UNSET

        if param.type is ParameterType.BOOLEAN:
            value = False
        if param.default is not UNSET:
            value = param.default

        if name in raw:
            raw_value = raw[name]
            if raw_value is not None:
                value = coerce(name, param.type, raw_value)
            elif param.type is ParameterType.BOOLEAN:
                value = True

        if value is UNSET:
            missing.append(name)
            continue
        values[name] = value

    unknown = [key for key in raw if key not in parameters]

    if missing or unknown:
        raise ValidationError(missing, unknown)

    return values
