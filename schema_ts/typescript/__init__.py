"""
TypeScript target: node algebra, mapping rules and printer.
"""

from .emitter import TypeScriptEmitter
from .naming import DeclarationNamer, is_valid_identifier, property_name
from .printer import RenderError, TypeScriptPrinter
from .scalars import INTRINSIC_LITERALS, SCALAR_KEYWORDS

__all__ = [
    "TypeScriptEmitter",
    "TypeScriptPrinter",
    "RenderError",
    "DeclarationNamer",
    "is_valid_identifier",
    "property_name",
    "SCALAR_KEYWORDS",
    "INTRINSIC_LITERALS",
]
