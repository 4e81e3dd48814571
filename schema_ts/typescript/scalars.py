"""
Scalar and intrinsic type mappings.

A name missing from these tables aborts emission; there is no catch-all
type.
"""

from typing import Dict

from .nodes import Keyword, KeywordType, LiteralKind, LiteralType

NUMERIC_SCALARS = (
    "numeric",
    "integer",
    "int8",
    "int16",
    "int32",
    "int64",
    "uint8",
    "uint16",
    "uint32",
    "uint64",
    "safeint",
    "float",
    "float32",
    "float64",
)

# Serialized as strings in JSON
STRING_SCALARS = (
    "string",
    "bytes",
    "url",
    "decimal",
    "decimal128",
    "plainDate",
    "plainTime",
    "utcDateTime",
    "offsetDateTime",
    "duration",
)

BOOLEAN_SCALARS = ("boolean",)


def _build_scalar_map() -> Dict[str, Keyword]:
    mapping = {}
    for name in NUMERIC_SCALARS:
        mapping[name] = Keyword.NUMBER
    for name in STRING_SCALARS:
        mapping[name] = Keyword.STRING
    for name in BOOLEAN_SCALARS:
        mapping[name] = Keyword.BOOLEAN
    return mapping


SCALAR_KEYWORDS: Dict[str, Keyword] = _build_scalar_map()

INTRINSIC_LITERALS: Dict[str, LiteralKind] = {
    "null": LiteralKind.NULL,
}


def keyword_for_scalar(name: str) -> KeywordType | None:
    keyword = SCALAR_KEYWORDS.get(name)
    return KeywordType(keyword) if keyword is not None else None


def literal_for_intrinsic(name: str) -> LiteralType | None:
    literal = INTRINSIC_LITERALS.get(name)
    return LiteralType(literal) if literal is not None else None
