"""
TypeScript emitter: maps schema entities to TypeScript nodes.

Every composite node is built through ``build`` so that children which are
still placeholders (references into a cycle) defer construction instead of
failing.
"""

from typing import Any, Dict, List, Optional

from ..emitter.builder import build, extract_value
from ..emitter.entities import Declaration, EmittedSourceFile, SourceFile
from ..emitter.errors import (
    NodeKindMismatchError,
    UnsupportedTypeError,
    compiler_assert,
    compiler_fail,
)
from ..emitter.framework import TypeEmitter
from ..logging_config import get_logger
from ..schema.types import ArrayType, Intrinsic, Model, ModelProperty, Scalar, UnionType
from . import factory
from .naming import DeclarationNamer, property_name
from .nodes import Identifier, TypeReference, is_statement
from .printer import TypeScriptPrinter
from .scalars import keyword_for_scalar, literal_for_intrinsic

logger = get_logger(__name__)


class TypeScriptEmitter(TypeEmitter):
    """Emits one ``type`` alias per named model into a single source file."""

    def __init__(self, emitter):
        super().__init__(emitter)
        self.namer = DeclarationNamer()
        self.printer = TypeScriptPrinter(indent_size=self.config.indent_size)

    def program_context(self) -> Dict[str, Any]:
        source_file = self.emitter.create_source_file(self.config.output_file)
        return {"scope": source_file.global_scope}

    def declaration_name(self, model: Model) -> str:
        return self.namer.name_for(model.name)

    def model_declaration(self, model: Model, name: str) -> Declaration:
        body = self.emitter.emit_model_properties(model)

        if model.base_model is not None:
            # Only ever a reference to the base, never its body
            base = self.emitter.emit_type(model.base_model)
            body = self.emitter.result.raw_code(
                build([base, body], factory.intersection_type)
            )

        exported = self.config.export_declarations
        doc = model.description
        node = build(
            [body],
            lambda args: factory.type_alias_declaration(name, args[0], exported, doc),
        )
        return self.emitter.result.declaration(name, node)

    def model_literal(self, model: Model) -> Any:
        return self.model_properties(model)

    def model_properties(self, model: Model) -> Any:
        members = [self.emitter.emit_type(prop) for prop in model.properties.values()]

        if model.indexer is not None:
            key_name = self.config.indexer_key_name
            value = self.emitter.emit_type(model.indexer)
            members.append(
                self.emitter.result.raw_code(
                    build([value], lambda args: factory.index_signature(key_name, args[0]))
                )
            )

        return build(members, factory.type_literal)

    def model_property_literal(self, prop: ModelProperty) -> Any:
        name = property_name(prop.name)
        optional = bool(prop.optional)
        doc = prop.description
        compiler_assert(
            prop.type is not None,
            f"property {prop.name} has no type",
            NodeKindMismatchError,
        )
        return build(
            [self.emitter.emit_type(prop.type)],
            lambda args: factory.property_signature(name, optional, args[0], doc),
        )

    def union_literal(self, union: UnionType) -> Any:
        variants = [self.emitter.emit_type(variant) for variant in union.variants]
        return build(variants, factory.union_type)

    def array_literal(self, array: ArrayType) -> Any:
        return build(
            [self.emitter.emit_type(array.element_type)],
            lambda args: factory.array_type(args[0]),
        )

    def scalar_declaration(self, scalar: Scalar) -> Any:
        node = keyword_for_scalar(scalar.name)
        if node is None:
            compiler_fail(
                f"unknown built-in scalar type: {scalar.name}", UnsupportedTypeError
            )
        return node

    def intrinsic(self, intrinsic: Intrinsic) -> Any:
        node = literal_for_intrinsic(intrinsic.name)
        if node is None:
            compiler_fail(
                f"unsupported intrinsic type: {intrinsic.name}", UnsupportedTypeError
            )
        return node

    def reference(self, declaration: Declaration) -> TypeReference:
        return TypeReference(Identifier(declaration.name))

    def source_file(self, source_file: SourceFile) -> EmittedSourceFile:
        statements = []
        for declaration in source_file.global_scope.declarations:
            node = extract_value(declaration)
            compiler_assert(
                is_statement(node),
                f"expected Statement for {declaration.name}, but received {type(node).__name__}",
                NodeKindMismatchError,
            )
            statements.append(node)

        header: Optional[str] = None
        if self.config.add_header_comment:
            header = self.config.header_text

        contents = self.printer.print_file(statements, header)
        logger.info(
            "Rendered %s with %d declaration(s)", source_file.path, len(statements)
        )
        return EmittedSourceFile(path=source_file.path, contents=contents)
