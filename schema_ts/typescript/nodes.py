"""
TypeScript output nodes.

Immutable representation of the subset of TypeScript syntax the emitter
produces. Nodes are plain data: they hold no reference back to the schema
entities they were built from.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union


class Keyword(Enum):
    """Primitive keyword types."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"


class LiteralKind(Enum):
    """Literal types."""

    NULL = "null"


class Node:
    """Base class of every output node."""

    __slots__ = ()


class TypeNode(Node):
    """A node usable in type position."""

    __slots__ = ()


class TypeElement(Node):
    """A member of a type literal."""

    __slots__ = ()


class Statement(Node):
    """A top-level statement of a source file."""

    __slots__ = ()


@dataclass(frozen=True)
class Identifier(Node):
    text: str


@dataclass(frozen=True)
class StringLiteral(Node):
    """Quoted name, used for property names that are not identifiers."""

    text: str


PropertyName = Union[Identifier, StringLiteral]


@dataclass(frozen=True)
class KeywordType(TypeNode):
    keyword: Keyword


@dataclass(frozen=True)
class LiteralType(TypeNode):
    literal: LiteralKind


@dataclass(frozen=True)
class TypeReference(TypeNode):
    """Reference to a declaration by name."""

    name: Identifier


@dataclass(frozen=True)
class TypeLiteral(TypeNode):
    members: Tuple[TypeElement, ...] = ()


@dataclass(frozen=True)
class ArrayTypeNode(TypeNode):
    element_type: TypeNode


@dataclass(frozen=True)
class UnionTypeNode(TypeNode):
    types: Tuple[TypeNode, ...]


@dataclass(frozen=True)
class IntersectionTypeNode(TypeNode):
    types: Tuple[TypeNode, ...]


@dataclass(frozen=True)
class PropertySignature(TypeElement):
    name: PropertyName
    optional: bool
    type: TypeNode
    doc: Optional[str] = None


@dataclass(frozen=True)
class IndexSignature(TypeElement):
    """``[key_name: key_type]: type``"""

    key_name: Identifier
    key_type: TypeNode
    type: TypeNode


@dataclass(frozen=True)
class TypeAliasDeclaration(Statement):
    name: Identifier
    type: TypeNode
    exported: bool = False
    doc: Optional[str] = None


def is_type_node(node: object) -> bool:
    return isinstance(node, TypeNode)


def is_type_element(node: object) -> bool:
    return isinstance(node, TypeElement)


def is_statement(node: object) -> bool:
    return isinstance(node, Statement)
