"""
TypeScript naming utilities.

Handles reserved words, identifier validity and quoting of property names.
"""

import re
from typing import Dict, Optional, Set

from .nodes import Identifier, PropertyName, StringLiteral

# Reserved words and predefined type names that cannot name a type alias
TS_RESERVED_WORDS = {
    "break", "case", "catch", "class", "const", "continue", "debugger",
    "default", "delete", "do", "else", "enum", "export", "extends", "false",
    "finally", "for", "function", "if", "import", "in", "instanceof", "new",
    "null", "return", "super", "switch", "this", "throw", "true", "try",
    "typeof", "var", "void", "while", "with", "implements", "interface",
    "let", "package", "private", "protected", "public", "static", "yield",
}

TS_BUILTIN_TYPES = {
    "any", "bigint", "boolean", "never", "number", "object", "string",
    "symbol", "undefined", "unknown", "type",
}

# Rename reasons recorded by DeclarationNamer
RENAME_INVALID = "invalid"
RENAME_RESERVED = "reserved"
RENAME_CLASH = "clash"

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def is_valid_identifier(name: str) -> bool:
    """Check whether ``name`` can be written unquoted."""
    return bool(_IDENTIFIER_RE.match(name))


def property_name(name: str) -> PropertyName:
    """Property name node: an identifier, or a string literal if quoting is needed."""
    if is_valid_identifier(name):
        return Identifier(name)
    return StringLiteral(name)


class DeclarationNamer:
    """
    Assigns type alias names.

    Names that clash with reserved words or builtin types get a suffix, and
    names already handed out get a numeric suffix. The same original name
    always maps to the same result within one namer.
    """

    def __init__(
        self,
        reserved_words: Optional[Set[str]] = None,
        builtin_types: Optional[Set[str]] = None,
        suffix: str = "_",
    ):
        self.reserved_words = TS_RESERVED_WORDS if reserved_words is None else reserved_words
        self.builtin_types = TS_BUILTIN_TYPES if builtin_types is None else builtin_types
        self.suffix = suffix
        self._assigned: Dict[str, str] = {}
        self._reasons: Dict[str, str] = {}
        self._used_names: Set[str] = set()

    def name_for(self, name: str) -> str:
        if name in self._assigned:
            return self._assigned[name]

        reason = None
        cleaned = re.sub(r"[^A-Za-z0-9_$]", "_", name) or "Model"
        if cleaned[0].isdigit():
            cleaned = f"_{cleaned}"
        if cleaned != name:
            reason = RENAME_INVALID

        if cleaned in self.reserved_words or cleaned in self.builtin_types:
            cleaned = f"{cleaned}{self.suffix}"
            reason = RENAME_RESERVED

        final_name = cleaned
        counter = 1
        while final_name in self._used_names:
            final_name = f"{cleaned}{self.suffix}{counter}"
            counter += 1
        if final_name != cleaned:
            reason = RENAME_CLASH

        self._assigned[name] = final_name
        self._used_names.add(final_name)
        if reason is not None:
            self._reasons[name] = reason
        return final_name

    def was_renamed(self, name: str) -> bool:
        return self.name_for(name) != name

    def assigned_name(self, name: str) -> Optional[str]:
        """Name handed out for ``name``, or None if it was never requested."""
        return self._assigned.get(name)

    def rename_reason(self, name: str) -> Optional[str]:
        """Why ``name`` was changed: one of the ``RENAME_*`` constants, or None."""
        return self._reasons.get(name)

    def reset(self) -> None:
        self._assigned.clear()
        self._reasons.clear()
        self._used_names.clear()
