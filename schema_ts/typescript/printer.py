"""
TypeScript printer.

Renders output nodes to source text. Statements are printed one by one and
assembled into a file through a Jinja2 template.
"""

import json
from typing import Any, Dict, List, Optional, Sequence

from jinja2 import DictLoader, Environment, TemplateError

from ..emitter.errors import EmitterError, NodeKindMismatchError, compiler_fail
from .nodes import (
    ArrayTypeNode,
    Identifier,
    IndexSignature,
    IntersectionTypeNode,
    KeywordType,
    LiteralType,
    Node,
    PropertySignature,
    StringLiteral,
    TypeAliasDeclaration,
    TypeLiteral,
    TypeReference,
    UnionTypeNode,
)


class RenderError(EmitterError):
    """A source file template failed to render."""

    pass


FILE_TEMPLATE_NAME = "models.ts.j2"

FILE_TEMPLATE = (
    "{% if header %}{{ header | comment }}\n\n{% endif %}"
    "{{ statements | join(separator) }}\n"
)


def _comment_filter(value: str, style: str = "//") -> str:
    """Add comment markers to each line."""
    lines = str(value).split("\n")
    return "\n".join(f"{style} {line}" if line.strip() else style for line in lines)


def create_environment(templates: Optional[Dict[str, str]] = None) -> Environment:
    """Jinja2 environment holding the file templates."""
    mapping = {FILE_TEMPLATE_NAME: FILE_TEMPLATE}
    if templates:
        mapping.update(templates)

    env = Environment(
        loader=DictLoader(mapping),
        autoescape=False,
        keep_trailing_newline=True,
        lstrip_blocks=True,
    )
    env.filters["comment"] = _comment_filter
    return env


class TypeScriptPrinter:
    """Prints nodes with the given indentation width."""

    def __init__(self, indent_size: int = 4, environment: Optional[Environment] = None):
        self.indent = " " * indent_size
        self._env = environment or create_environment()

    def print_node(self, node: Node, level: int = 0) -> str:
        if isinstance(node, TypeAliasDeclaration):
            prefix = "export " if node.exported else ""
            alias = f"{prefix}type {node.name.text} = {self.print_node(node.type, level)};"
            return self._with_doc(alias, node.doc, self.indent * level)

        if isinstance(node, KeywordType):
            return node.keyword.value

        if isinstance(node, LiteralType):
            return node.literal.value

        if isinstance(node, TypeReference):
            return node.name.text

        if isinstance(node, TypeLiteral):
            return self._print_type_literal(node, level)

        if isinstance(node, ArrayTypeNode):
            element = self.print_node(node.element_type, level)
            if isinstance(node.element_type, (UnionTypeNode, IntersectionTypeNode)):
                element = f"({element})"
            return f"{element}[]"

        if isinstance(node, UnionTypeNode):
            return " | ".join(self.print_node(t, level) for t in node.types)

        if isinstance(node, IntersectionTypeNode):
            parts = []
            for t in node.types:
                text = self.print_node(t, level)
                parts.append(f"({text})" if isinstance(t, UnionTypeNode) else text)
            return " & ".join(parts)

        if isinstance(node, PropertySignature):
            marker = "?" if node.optional else ""
            return f"{self._print_name(node.name)}{marker}: {self.print_node(node.type, level)}"

        if isinstance(node, IndexSignature):
            key_type = self.print_node(node.key_type, level)
            return f"[{node.key_name.text}: {key_type}]: {self.print_node(node.type, level)}"

        compiler_fail(f"cannot print node {node!r}", NodeKindMismatchError)

    def _print_type_literal(self, node: TypeLiteral, level: int) -> str:
        if not node.members:
            return "{}"

        inner = self.indent * (level + 1)
        lines = ["{"]
        for member in node.members:
            member_text = f"{inner}{self.print_node(member, level + 1)};"
            lines.append(self._with_doc(member_text, getattr(member, "doc", None), inner))
        lines.append(f"{self.indent * level}}}")
        return "\n".join(lines)

    @staticmethod
    def _with_doc(text: str, doc: Optional[str], indent: str) -> str:
        """Prefix ``text`` with a ``/** */`` comment holding ``doc``."""
        if not doc or not doc.strip():
            return text

        lines = doc.strip().replace("*/", "*\\/").split("\n")
        if len(lines) == 1:
            return f"{indent}/** {lines[0]} */\n{text}"
        body = "\n".join(f"{indent} * {line}".rstrip() for line in lines)
        return f"{indent}/**\n{body}\n{indent} */\n{text}"

    @staticmethod
    def _print_name(name: Any) -> str:
        if isinstance(name, StringLiteral):
            return json.dumps(name.text)
        if isinstance(name, Identifier):
            return name.text
        compiler_fail(f"invalid property name {name!r}", NodeKindMismatchError)

    def print_file(self, statements: Sequence[Node], header: Optional[str] = None) -> str:
        """
        Render a complete source file.

        Args:
            statements: Top-level nodes in output order
            header: Optional comment placed at the top of the file

        Returns:
            File contents; empty when there are no statements
        """
        if not statements:
            return ""

        printed: List[str] = [self.print_node(statement) for statement in statements]
        try:
            template = self._env.get_template(FILE_TEMPLATE_NAME)
            return template.render(header=header, statements=printed, separator="\n\n")
        except TemplateError as e:
            raise RenderError(f"Failed to render source file: {e}") from e
