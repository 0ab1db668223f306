import pytest

from argdispatch.core.errors import ErrorCode, RegistrationError
from argdispatch.core.schema import UNSET, CommandSchema, ParameterSchema, ParameterType


def handler(params: dict) -> None:
    return None


def test_type_is_normalized_from_string() -> None:
    param = ParameterSchema.from_mapping({"type": "number", "default": 2})
    assert param.type is ParameterType.NUMBER
    assert param.default == 2
    assert param.optional


def test_no_default_is_unset() -> None:
    param = ParameterSchema(ParameterType.STRING)
    assert param.default is UNSET
    assert not param.optional


def test_null_default_is_optional() -> None:
    assert ParameterSchema(ParameterType.STRING, default=None).optional


@pytest.mark.parametrize(
    "type_, default",
    [("number", True), ("number", "1"), ("boolean", 1), ("string", 3)],
)
def test_default_must_match_type(type_: str, default: object) -> None:
    with pytest.raises(RegistrationError):
        ParameterSchema.from_mapping({"type": type_, "default": default})


def test_unknown_type_is_rejected() -> None:
    with pytest.raises(RegistrationError, match="Unsupported parameter type"):
        ParameterSchema.from_mapping({"type": "list"})


def test_missing_type_is_rejected() -> None:
    with pytest.raises(RegistrationError):
        ParameterSchema.from_mapping({"default": 1})


@pytest.mark.parametrize("name", ["1abc", "-x", "has space", ""])
def test_command_name_grammar(name: str) -> None:
    with pytest.raises(RegistrationError) as exc:
        CommandSchema(name=name, handler=handler)
    assert exc.value.code is ErrorCode.E_SCHEMA_INVALID


def test_parameters_accept_dict_declarations_and_are_read_only() -> None:
    schema = CommandSchema(
        name="greet",
        handler=handler,
        parameters={"name": {"type": "string", "shorthand": "n"}},
    )
    assert isinstance(schema.parameters["name"], ParameterSchema)
    assert schema.parameters["name"].shorthand == "n"
    with pytest.raises(TypeError):
        schema.parameters["other"] = ParameterSchema(ParameterType.STRING)  # type: ignore[index]


def test_duplicate_shorthand_is_rejected() -> None:
    with pytest.raises(RegistrationError, match="shorthand -v"):
        CommandSchema(
            name="c",
            handler=handler,
            parameters={
                "verbose": {"type": "boolean", "shorthand": "v"},
                "version": {"type": "boolean", "shorthand": "v"},
            },
        )


def test_shorthand_shadowing_a_parameter_is_rejected() -> None:
    with pytest.raises(RegistrationError, match="shadows"):
        CommandSchema(
            name="c",
            handler=handler,
            parameters={
                "n": {"type": "number"},
                "name": {"type": "string", "shorthand": "n"},
            },
        )


def test_handler_must_be_callable() -> None:
    with pytest.raises(RegistrationError):
        CommandSchema(name="c", handler="nope")  # type: ignore[arg-type]


def test_names_with_trailing_newline_are_rejected() -> None:
    with pytest.raises(RegistrationError):
        CommandSchema(name="greet\n", handler=handler)
    with pytest.raises(RegistrationError):
        CommandSchema(name="greet", handler=handler, parameters={"name\n": {"type": "string"}})
    with pytest.raises(RegistrationError, match="Invalid shorthand"):
        ParameterSchema.from_mapping({"type": "boolean", "shorthand": "l\n"})
