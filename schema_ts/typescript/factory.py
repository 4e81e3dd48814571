"""
Kind-checked constructors for TypeScript nodes.

These are the construction functions handed to ``build``. Each one checks
that the child nodes it receives are of the expected kind and aborts with
``NodeKindMismatchError`` otherwise.
"""

from typing import Any, List, Optional, Sequence

from ..emitter.errors import NodeKindMismatchError, compiler_assert
from .nodes import (
    ArrayTypeNode,
    Identifier,
    IndexSignature,
    IntersectionTypeNode,
    KeywordType,
    Keyword,
    PropertyName,
    PropertySignature,
    TypeAliasDeclaration,
    TypeElement,
    TypeLiteral,
    TypeNode,
    UnionTypeNode,
    is_type_element,
    is_type_node,
)


def _expect_type_node(node: Any, context: str) -> TypeNode:
    compiler_assert(
        is_type_node(node),
        f"expected TypeNode for {context}, but received {type(node).__name__}",
        NodeKindMismatchError,
    )
    return node


def _expect_type_element(node: Any, context: str) -> TypeElement:
    compiler_assert(
        is_type_element(node),
        f"expected TypeElement for {context}, but received {type(node).__name__}",
        NodeKindMismatchError,
    )
    return node


def type_alias_declaration(
    name: str, type_node: Any, exported: bool = False, doc: Optional[str] = None
) -> TypeAliasDeclaration:
    return TypeAliasDeclaration(
        name=Identifier(name),
        type=_expect_type_node(type_node, f"type alias {name}"),
        exported=exported,
        doc=doc,
    )


def type_literal(members: Sequence[Any]) -> TypeLiteral:
    return TypeLiteral(
        tuple(_expect_type_element(m, "type literal member") for m in members)
    )


def property_signature(
    name: PropertyName, optional: bool, type_node: Any, doc: Optional[str] = None
) -> PropertySignature:
    return PropertySignature(
        name=name,
        optional=optional,
        type=_expect_type_node(type_node, f"property {name.text}"),
        doc=doc,
    )


def index_signature(key_name: str, value_type: Any) -> IndexSignature:
    """Index signature with a ``string`` key."""
    return IndexSignature(
        key_name=Identifier(key_name),
        key_type=KeywordType(Keyword.STRING),
        type=_expect_type_node(value_type, "index signature"),
    )


def array_type(element_type: Any) -> ArrayTypeNode:
    return ArrayTypeNode(_expect_type_node(element_type, "array element"))


def union_type(types: Sequence[Any]) -> UnionTypeNode:
    return UnionTypeNode(tuple(_expect_type_node(t, "union variant") for t in types))


def intersection_type(types: List[Any]) -> IntersectionTypeNode:
    """Intersection of exactly two types: a base reference and own members."""
    compiler_assert(
        len(types) == 2,
        f"expected 2 intersection members, but received {len(types)}",
        NodeKindMismatchError,
    )
    return IntersectionTypeNode(
        tuple(_expect_type_node(t, "intersection member") for t in types)
    )
