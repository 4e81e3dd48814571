import pytest

from schema_ts.typescript.naming import (
    RENAME_CLASH,
    RENAME_INVALID,
    RENAME_RESERVED,
    DeclarationNamer,
    is_valid_identifier,
    property_name,
)
from schema_ts.typescript.nodes import Identifier, StringLiteral


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Person", "Person"),
        ("default", "default_"),
        ("string", "string_"),
        ("my-model", "my_model"),
        ("2fa", "_2fa"),
    ],
)
def test_name_for(name: str, expected: str) -> None:
    assert DeclarationNamer().name_for(name) == expected


def test_clashing_names_get_numeric_suffix() -> None:
    namer = DeclarationNamer()
    assert namer.name_for("my-model") == "my_model"
    assert namer.name_for("my_model") == "my_model_1"
    assert namer.name_for("my-model") == "my_model"


def test_was_renamed_and_reset() -> None:
    namer = DeclarationNamer()
    assert namer.was_renamed("class")
    assert not namer.was_renamed("Order")

    namer.reset()
    assert namer.name_for("Order") == "Order"


def test_property_names() -> None:
    assert is_valid_identifier("$ref")
    assert not is_valid_identifier("content-type")
    assert property_name("firstName") == Identifier("firstName")
    assert property_name("content-type") == StringLiteral("content-type")
    assert property_name("1st") == StringLiteral("1st")


def test_rename_reasons() -> None:
    namer = DeclarationNamer()
    namer.name_for("A-B")
    namer.name_for("A_B")
    namer.name_for("default")
    namer.name_for("Order")

    assert namer.assigned_name("A_B") == "A_B_1"
    assert namer.rename_reason("A-B") == RENAME_INVALID
    assert namer.rename_reason("A_B") == RENAME_CLASH
    assert namer.rename_reason("default") == RENAME_RESERVED
    assert namer.rename_reason("Order") is None
    assert namer.assigned_name("Unseen") is None
