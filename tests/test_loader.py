import pytest

from schema_ts.schema import (
    ArrayType,
    Intrinsic,
    Model,
    Scalar,
    SchemaError,
    UnionType,
    load_program,
)


def test_forward_and_self_references_resolve_to_models() -> None:
    program = load_program(
        {
            "models": [
                {"name": "A", "properties": {"b": {"type": "B"}, "self": {"type": "A"}}},
                {"name": "B", "properties": {"a": "A"}},
            ]
        }
    )

    a = program.get_model("A")
    b = program.get_model("B")
    assert list(program.models) == ["A", "B"]
    assert a.properties["b"].type is b
    assert a.properties["self"].type is a
    assert b.properties["a"].type is a
    assert b.properties["a"].model is b


def test_property_order_and_optional_flag() -> None:
    program = load_program(
        {
            "models": [
                {
                    "name": "Person",
                    "properties": {
                        "lastName": {"type": "string"},
                        "age": {"type": "int32", "optional": True},
                        "firstName": "string",
                    },
                }
            ]
        }
    )

    person = program.get_model("Person")
    assert list(person.properties) == ["lastName", "age", "firstName"]
    assert person.properties["age"].optional is True
    assert person.properties["firstName"].optional is False
    assert isinstance(person.properties["age"].type, Scalar)
    assert person.properties["lastName"].type is person.properties["firstName"].type


def test_composite_references() -> None:
    program = load_program(
        {
            "models": [
                {
                    "name": "Tree",
                    "properties": {
                        "children": {"type": {"array": "Tree"}},
                        "parent": {"type": {"union": ["Tree", "null"]}},
                        "meta": {"type": {"properties": {"k": "string"}}},
                    },
                    "additionalProperties": "string",
                }
            ]
        }
    )

    tree = program.get_model("Tree")
    children = tree.properties["children"].type
    parent = tree.properties["parent"].type
    meta = tree.properties["meta"].type

    assert isinstance(children, ArrayType) and children.element_type is tree
    assert isinstance(parent, UnionType)
    assert parent.variants[0] is tree
    assert isinstance(parent.variants[1], Intrinsic)
    assert isinstance(meta, Model) and meta.is_anonymous
    assert list(meta.properties) == ["k"]
    assert isinstance(tree.indexer, Scalar)


def test_extends_resolves_base() -> None:
    program = load_program(
        {
            "models": [
                {"name": "Child", "extends": "Base", "properties": {}},
                {"name": "Base", "properties": {"id": "string"}},
            ]
        }
    )
    assert program.get_model("Child").base_model is program.get_model("Base")


def test_unknown_scalar_names_load_as_scalars() -> None:
    program = load_program({"models": [{"name": "M", "properties": {"x": "int128"}}]})
    assert program.get_model("M").properties["x"].type.name == "int128"


@pytest.mark.parametrize(
    "document, message",
    [
        ({"models": {}}, "must be a list"),
        ({"models": [{"properties": {}}]}, "has no name"),
        ({"models": [{"name": "A"}, {"name": "A"}]}, "Duplicate model name"),
        ({"models": [{"name": "A", "extends": "Missing"}]}, "unknown model"),
        (
            {"models": [{"name": "A", "extends": "B"}, {"name": "B", "extends": "A"}]},
            "Circular 'extends'",
        ),
        ({"models": [{"name": "A", "properties": {"x": {}}}]}, "must declare a type"),
        (
            {"models": [{"name": "A", "properties": {"x": {"type": "string", "optional": "yes"}}}]},
            "must be a boolean",
        ),
        ({"models": [{"name": "A", "properties": {"x": "not a name"}}]}, "Invalid type reference"),
        ({"models": [{"name": "A", "properties": {"x": {"type": {"union": []}}}}]}, "variants"),
        ({"models": [{"name": "A", "properties": {"x": {"type": 3}}}]}, "Unrecognized"),
    ],
)
def test_malformed_documents(document, message: str) -> None:
    with pytest.raises(SchemaError, match=message):
        load_program(document)


def test_document_must_be_object() -> None:
    with pytest.raises(SchemaError):
        load_program(["models"])


def test_descriptions_are_loaded() -> None:
    program = load_program(
        {
            "models": [
                {
                    "name": "M",
                    "description": "A model.",
                    "properties": {"x": {"type": "string", "description": "An x."}},
                }
            ]
        }
    )
    model = program.get_model("M")
    assert model.description == "A model."
    assert model.properties["x"].description == "An x."


def test_description_must_be_string() -> None:
    with pytest.raises(SchemaError, match="'description' must be a string"):
        load_program({"models": [{"name": "M", "description": 3}]})
