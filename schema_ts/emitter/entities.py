"""
Emit entities and the per-file declaration registry.

An emit entity wraps the result of mapping one schema entity. Its value is
either a finished output node or a ``Placeholder`` for one.
"""

from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Union

from .placeholder import Placeholder


class RawCode:
    """Anonymous emitted value, embedded by value into its parent."""

    kind = "code"

    def __init__(self, value: Union[Any, Placeholder]):
        self.value = value

    def __repr__(self) -> str:
        return f"RawCode({self.value!r})"


class Declaration:
    """
    Named emitted value, tracked by a scope.

    The declaration registers itself with ``scope`` on creation, so it takes
    its place in the output file even while ``value`` is still pending.
    """

    kind = "declaration"

    def __init__(self, name: str, scope: "Scope", value: Union[Any, Placeholder]):
        self.name = name
        self.scope = scope
        self.value = value
        scope.add_declaration(self)

    def __repr__(self) -> str:
        return f"Declaration({self.name!r})"


EmitEntity = Union[RawCode, Declaration]


class Scope:
    """Ordered, append-only list of declarations."""

    def __init__(self, name: str, source_file: Optional["SourceFile"] = None):
        self.name = name
        self.source_file = source_file
        self.declarations: List[Declaration] = []

    def add_declaration(self, declaration: Declaration) -> None:
        self.declarations.append(declaration)

    def __len__(self) -> int:
        return len(self.declarations)


class SourceFile:
    """An output file under construction."""

    def __init__(self, path: str):
        self.path = path
        self.global_scope = Scope(path, self)


@dataclass
class EmittedSourceFile:
    """Rendered contents of one source file."""

    path: str
    contents: str


@dataclass
class ResultFactory:
    """
    Creates emit entities bound to the current declaration scope.

    ``scope_provider`` returns the scope new declarations are registered in.
    """

    scope_provider: Callable[[], Scope]

    def declaration(self, name: str, value: Union[Any, Placeholder]) -> Declaration:
        return Declaration(name, self.scope_provider(), value)

    def raw_code(self, value: Union[Any, Placeholder]) -> RawCode:
        return RawCode(value)
