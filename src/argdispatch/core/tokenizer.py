"""Turn command line tokens into raw name/value pairs.

Accepted shapes are ``--name``, ``--name=value``, ``--name value``, ``-s`` and
``-s value``. No schema is consulted here: values stay strings and names stay
as written (minus the dashes).
"""

import re
from collections.abc import Sequence

from .errors import MalformedArgument

NAME = r"[a-zA-Z0-9][a-zA-Z0-9_-]*"

COMMAND_NAME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9_-]*\Z")
ARGUMENT_NAME_RE = re.compile(rf"^{NAME}\Z")
LONG_ARGUMENT_RE = re.compile(rf"^--({NAME})(?:=([\s\S]+))?\Z")
SHORT_ARGUMENT_RE = re.compile(rf"^-({NAME})\Z")

RawArguments = dict[str, str | None]


def match_argument(token: str) -> re.Match[str] | None:
    return LONG_ARGUMENT_RE.match(token) or SHORT_ARGUMENT_RE.match(token)


def is_argument(token: str) -> bool:
    return match_argument(token) is not None


def tokenize(arguments: Sequence[str]) -> RawArguments:
    """Parse ``arguments`` into a name -> raw value mapping.

    A name followed by a token that is not itself an argument takes that token
    as its value. A name with no value maps to ``None``, which is how boolean
    flags show up. Later occurrences of a name replace earlier ones.

    Raises:
        MalformedArgument: on the first token that is neither a long nor a
            short argument.
    """

    raw: RawArguments = {}
    skip_next = False

    for index, token in enumerate(arguments):
        if skip_next:
            skip_next = False
            continue

        match = match_argument(token)
        if match is None:
            raise MalformedArgument(token)

        name = match.group(1)
        value = match.group(2) if match.re is LONG_ARGUMENT_RE else None

        if value is not None:
            raw[name] = value
            continue

        following = arguments[index + 1] if index + 1 < len(arguments) else None
        if following is not None and not is_argument(following):
            raw[name] = following
            skip_next = True
            continue

        raw[name] = None

    return raw
