"""
Emitter framework: walks a schema program and dispatches each entity to a
language-specific ``TypeEmitter``.

The framework owns the declaration cache and the source files. Named models
become declarations; every other use of a named model is a reference to its
declaration. A reference to a model whose declaration is still being built
(a cycle) is handed out as a placeholder and resolved as soon as the
declaration exists.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Type, Union

from ..logging_config import get_logger
from ..schema.types import Model, SchemaProgram, TypeKind
from ..utils import write_file
from .config import EmitterConfig, load_config
from .entities import (
    Declaration,
    EmitEntity,
    EmittedSourceFile,
    RawCode,
    ResultFactory,
    Scope,
    SourceFile,
)
from .errors import (
    NodeKindMismatchError,
    UnsupportedTypeError,
    compiler_assert,
    compiler_fail,
)
from .placeholder import Placeholder

logger = get_logger(__name__)


class TypeEmitter:
    """
    Base class for language emitters.

    Subclasses override one method per entity kind. Each method returns an
    output node, a placeholder for one, or an emit entity; the framework wraps
    bare values in ``RawCode``.
    """

    def __init__(self, emitter: "AssetEmitter"):
        self.emitter = emitter

    @property
    def config(self) -> EmitterConfig:
        return self.emitter.config

    def program_context(self) -> Dict[str, Any]:
        """Return the context for the whole program, including its ``scope``."""
        return {}

    def declaration_name(self, model: Model) -> str:
        return model.name

    def model_declaration(self, model: Model, name: str) -> Declaration:
        compiler_fail(f"model declarations are not supported: {name}", UnsupportedTypeError)

    def model_literal(self, model: Model) -> Any:
        compiler_fail("anonymous models are not supported", UnsupportedTypeError)

    def model_properties(self, model: Model) -> Any:
        compiler_fail("model properties are not supported", UnsupportedTypeError)

    def model_property_literal(self, prop) -> Any:
        compiler_fail(f"model property is not supported: {prop.name}", UnsupportedTypeError)

    def union_literal(self, union) -> Any:
        compiler_fail("unions are not supported", UnsupportedTypeError)

    def array_literal(self, array) -> Any:
        compiler_fail("arrays are not supported", UnsupportedTypeError)

    def scalar_declaration(self, scalar) -> Any:
        compiler_fail(f"unknown built-in scalar type: {scalar.name}", UnsupportedTypeError)

    def intrinsic(self, intrinsic) -> Any:
        compiler_fail(f"unsupported intrinsic type: {intrinsic.name}", UnsupportedTypeError)

    def reference(self, declaration: Declaration) -> Any:
        compiler_fail("references are not supported", UnsupportedTypeError)

    def source_file(self, source_file: SourceFile) -> EmittedSourceFile:
        compiler_fail("source files are not supported", UnsupportedTypeError)


# Entity kind -> TypeEmitter method
_DISPATCH = {
    TypeKind.MODEL_PROPERTY: "model_property_literal",
    TypeKind.SCALAR: "scalar_declaration",
    TypeKind.UNION: "union_literal",
    TypeKind.ARRAY: "array_literal",
    TypeKind.INTRINSIC: "intrinsic",
}


class AssetEmitter:
    """Drives a ``TypeEmitter`` over a ``SchemaProgram``."""

    def __init__(
        self,
        program: SchemaProgram,
        emitter_class: Type[TypeEmitter],
        config: Optional[EmitterConfig] = None,
    ):
        self.program = program
        self.config = config or load_config()
        self.result = ResultFactory(self._current_scope)

        self._source_files: List[SourceFile] = []
        self._declarations: Dict[Model, Declaration] = {}
        self._in_progress: Dict[Model, List[Placeholder]] = {}

        self.type_emitter = emitter_class(self)
        self._context: Dict[str, Any] = self.type_emitter.program_context()

    @property
    def source_files(self) -> List[SourceFile]:
        return list(self._source_files)

    def get_program(self) -> SchemaProgram:
        return self.program

    def create_source_file(self, path: str) -> SourceFile:
        """Open a new, empty source file."""
        source_file = SourceFile(path)
        self._source_files.append(source_file)
        logger.debug("Created source file %s", path)
        return source_file

    def _current_scope(self) -> Scope:
        scope = self._context.get("scope")
        compiler_assert(scope is not None, "no declaration scope in the current context")
        return scope

    # Traversal

    def emit_program(self) -> None:
        """Emit every named model of the program in declaration order."""
        for model in self.program.iter_models():
            self.emit_type(model)
        logger.info("Emitted %d declaration(s)", len(self._declarations))

    def emit_type(self, entity: Any) -> EmitEntity:
        """Emit one schema entity and return its emit entity."""
        if isinstance(entity, Model):
            if entity.is_anonymous:
                return self._wrap(self.type_emitter.model_literal(entity))
            return self._emit_reference(entity)

        method_name = _DISPATCH.get(getattr(entity, "kind", None))
        if method_name is None:
            compiler_fail(
                f"no mapping rule for entity {entity!r}", UnsupportedTypeError
            )
        return self._wrap(getattr(self.type_emitter, method_name)(entity))

    def emit_model_properties(self, model: Model) -> EmitEntity:
        return self._wrap(self.type_emitter.model_properties(model))

    def emit_declaration(self, model: Model) -> Declaration:
        """
        Emit the declaration of ``model``, or return it if already emitted.

        References to ``model`` made while its declaration is being built are
        resolved once the declaration is created.
        """
        existing = self._declarations.get(model)
        if existing is not None:
            return existing

        self._in_progress[model] = []
        name = self.type_emitter.declaration_name(model)
        logger.debug("Emitting declaration %s", name)

        declaration = self.type_emitter.model_declaration(model, name)
        compiler_assert(
            isinstance(declaration, Declaration),
            f"expected Declaration for model {name}, but received {declaration!r}",
            NodeKindMismatchError,
        )
        self._declarations[model] = declaration

        waiting = self._in_progress.pop(model)
        if waiting:
            logger.debug("Resolving %d circular reference(s) to %s", len(waiting), name)
            reference = self.type_emitter.reference(declaration)
            for placeholder in waiting:
                placeholder.set_value(reference)

        return declaration

    def _emit_reference(self, model: Model) -> RawCode:
        declaration = self._declarations.get(model)
        if declaration is None:
            if model in self._in_progress:
                placeholder = Placeholder()
                self._in_progress[model].append(placeholder)
                logger.debug("Deferring circular reference to %s", model.name)
                return self.result.raw_code(placeholder)
            declaration = self.emit_declaration(model)

        return self.result.raw_code(self.type_emitter.reference(declaration))

    def _wrap(self, value: Any) -> EmitEntity:
        if isinstance(value, (RawCode, Declaration)):
            return value
        return self.result.raw_code(value)

    # Output

    def emit_source_file(self, source_file: SourceFile) -> EmittedSourceFile:
        return self.type_emitter.source_file(source_file)

    def render_output(self) -> List[EmittedSourceFile]:
        """Finalize every source file without writing anything."""
        return [self.emit_source_file(sf) for sf in self._source_files]

    def write_output(
        self,
        output_dir: Optional[Union[str, Path]] = None,
        emitted: Optional[List[EmittedSourceFile]] = None,
    ) -> List[Path]:
        """
        Finalize and write every source file.

        All files are rendered before the first write, so a failing file
        leaves nothing on disk.

        Args:
            output_dir: Target directory (defaults to ``config.output_dir``)
            emitted: Output of an earlier ``render_output`` call to write as is

        Returns:
            Paths of the written files
        """
        base_dir = Path(output_dir if output_dir is not None else self.config.output_dir)
        if emitted is None:
            emitted = self.render_output()

        written = []
        for emitted_file in emitted:
            path = base_dir / emitted_file.path
            write_file(path, emitted_file.contents)
            written.append(path)
        return written
