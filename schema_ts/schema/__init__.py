"""
Schema graph: entity types and the document loader.
"""

from .types import (
    ArrayType,
    Intrinsic,
    Model,
    ModelProperty,
    Scalar,
    SchemaProgram,
    SchemaType,
    TypeKind,
    UnionType,
)
from .loader import INTRINSIC_NAMES, SchemaError, SchemaLoader, load_program

__all__ = [
    # Entities
    "ArrayType",
    "Intrinsic",
    "Model",
    "ModelProperty",
    "Scalar",
    "SchemaProgram",
    "SchemaType",
    "TypeKind",
    "UnionType",
    # Loading
    "INTRINSIC_NAMES",
    "SchemaError",
    "SchemaLoader",
    "load_program",
]
