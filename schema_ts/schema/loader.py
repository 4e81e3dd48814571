"""
Schema document loading.

Converts a JSON schema document into a ``SchemaProgram`` graph. Model names
are collected before any body is read, so properties may refer to models
declared later in the document, to their own model, or to each other.
"""

from typing import Any, Dict, Optional

from ..logging_config import get_logger
from .types import (
    ArrayType,
    Intrinsic,
    Model,
    ModelProperty,
    SchemaProgram,
    SchemaType,
    UnionType,
)

logger = get_logger(__name__)

# Names that denote intrinsic types rather than scalars
INTRINSIC_NAMES = {"null", "unknown", "void", "never"}


class SchemaError(Exception):
    """Exception raised for malformed schema documents."""

    pass


class SchemaLoader:
    """Builds a ``SchemaProgram`` from a parsed JSON document."""

    def __init__(self, source: Optional[str] = None):
        self.program = SchemaProgram(source=source)
        self._intrinsics: Dict[str, Intrinsic] = {}

    def load(self, document: Dict[str, Any]) -> SchemaProgram:
        """
        Load every model of ``document``.

        Args:
            document: Parsed schema document with a ``models`` list

        Returns:
            The loaded program

        Raises:
            SchemaError: If the document is malformed or references are unknown
        """
        if not isinstance(document, dict):
            raise SchemaError("Schema document must be a JSON object")

        entries = document.get("models", [])
        if not isinstance(entries, list):
            raise SchemaError("'models' must be a list")

        # First pass: declare every named model so references can resolve
        for index, entry in enumerate(entries):
            if not isinstance(entry, dict):
                raise SchemaError(f"Model entry #{index} must be an object")
            name = entry.get("name")
            if not isinstance(name, str) or not name:
                raise SchemaError(f"Model entry #{index} has no name")
            if name in self.program.models:
                raise SchemaError(f"Duplicate model name: {name}")
            self.program.models[name] = Model(
                name=name, description=_description(entry, name)
            )

        # Second pass: bodies
        for entry in entries:
            model = self.program.models[entry["name"]]
            self._load_model_body(model, entry)

            base_name = entry.get("extends")
            if base_name is not None:
                model.base_model = self._resolve_base(model, base_name)

        self._check_base_cycles()

        logger.info(
            "Loaded %d model(s) from %s",
            len(self.program.models),
            self.program.source or "document",
        )
        return self.program

    def _load_model_body(self, model: Model, entry: Dict[str, Any]) -> None:
        context = model.name or "<anonymous>"
        properties = entry.get("properties", {})
        if not isinstance(properties, dict):
            raise SchemaError(f"Properties of model {context} must be an object")

        for prop_name, prop_data in properties.items():
            model.add_property(self._load_property(prop_name, prop_data, context))

        if "additionalProperties" in entry:
            model.indexer = self._resolve_type(
                entry["additionalProperties"], f"{context}[additionalProperties]"
            )

    def _load_property(self, name: str, data: Any, context: str) -> ModelProperty:
        where = f"{context}.{name}"

        # Shorthand: "name": "string"
        if isinstance(data, str):
            return ModelProperty(name=name, type=self._resolve_type(data, where))

        if not isinstance(data, dict) or "type" not in data:
            raise SchemaError(f"Property {where} must declare a type")

        optional = data.get("optional", False)
        if not isinstance(optional, bool):
            raise SchemaError(f"Property {where}: 'optional' must be a boolean")

        return ModelProperty(
            name=name,
            type=self._resolve_type(data["type"], where),
            optional=optional,
            description=_description(data, where),
        )

    def _resolve_type(self, ref: Any, where: str) -> SchemaType:
        """Resolve a type reference appearing at ``where``."""
        if isinstance(ref, str):
            model = self.program.get_model(ref)
            if model is not None:
                return model
            if ref in INTRINSIC_NAMES:
                return self._intrinsic(ref)
            if not ref.isidentifier():
                raise SchemaError(f"Invalid type reference '{ref}' at {where}")
            # Unmapped scalar names fail at emission, not here
            return self.program.get_scalar(ref)

        if isinstance(ref, dict):
            if "array" in ref:
                return ArrayType(self._resolve_type(ref["array"], f"{where}[]"))

            if "union" in ref:
                variants = ref["union"]
                if not isinstance(variants, list) or not variants:
                    raise SchemaError(f"Union at {where} must list its variants")
                return UnionType(
                    [
                        self._resolve_type(variant, f"{where}|{i}")
                        for i, variant in enumerate(variants)
                    ]
                )

            if "properties" in ref or "additionalProperties" in ref:
                inline = Model(name="")
                self._load_model_body(inline, ref)
                return inline

        raise SchemaError(f"Unrecognized type reference at {where}: {ref!r}")

    def _resolve_base(self, model: Model, base_name: Any) -> Model:
        if not isinstance(base_name, str):
            raise SchemaError(f"Model {model.name}: 'extends' must be a model name")
        base = self.program.get_model(base_name)
        if base is None:
            raise SchemaError(f"Model {model.name} extends unknown model {base_name}")
        return base

    def _intrinsic(self, name: str) -> Intrinsic:
        intrinsic = self._intrinsics.get(name)
        if intrinsic is None:
            intrinsic = Intrinsic(name)
            self._intrinsics[name] = intrinsic
        return intrinsic

    def _check_base_cycles(self) -> None:
        for model in self.program.iter_models():
            seen = {id(model)}
            base = model.base_model
            while base is not None:
                if id(base) in seen:
                    raise SchemaError(f"Circular 'extends' chain at model {model.name}")
                seen.add(id(base))
                base = base.base_model


def _description(data: Dict[str, Any], where: str) -> Optional[str]:
    description = data.get("description")
    if description is not None and not isinstance(description, str):
        raise SchemaError(f"{where}: 'description' must be a string")
    return description

def load_program(document: Dict[str, Any], source: Optional[str] = None) -> SchemaProgram:
    """
    Convenience function to load a schema document.

    Args:
        document: Parsed schema document
        source: Description of where the document came from

    Returns:
        Loaded SchemaProgram
    """
    return SchemaLoader(source).load(document)
