"""
Schema graph entities consumed by the emitter.

Entities reference each other by object, so the graph may contain cycles.
They are compared by identity: two models with the same shape are still two
different declarations.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional, Union


class TypeKind(Enum):
    """Kinds of schema entity."""

    MODEL = "model"
    MODEL_PROPERTY = "model_property"
    SCALAR = "scalar"
    UNION = "union"
    ARRAY = "array"
    INTRINSIC = "intrinsic"


@dataclass(eq=False)
class Scalar:
    """Named primitive type such as ``string`` or ``int32``."""

    name: str
    kind: TypeKind = field(default=TypeKind.SCALAR, init=False, repr=False)


@dataclass(eq=False)
class Intrinsic:
    """Named sentinel type such as ``null``."""

    name: str
    kind: TypeKind = field(default=TypeKind.INTRINSIC, init=False, repr=False)


@dataclass(eq=False)
class ArrayType:
    """Homogeneous list of ``element_type``."""

    element_type: "SchemaType"
    kind: TypeKind = field(default=TypeKind.ARRAY, init=False, repr=False)


@dataclass(eq=False)
class UnionType:
    """Ordered set of variant types."""

    variants: List["SchemaType"] = field(default_factory=list)
    kind: TypeKind = field(default=TypeKind.UNION, init=False, repr=False)


@dataclass(eq=False)
class ModelProperty:
    """A property owned by exactly one model."""

    name: str
    type: Optional["SchemaType"] = None
    optional: bool = False
    model: Optional["Model"] = field(default=None, repr=False)
    description: Optional[str] = None
    kind: TypeKind = field(default=TypeKind.MODEL_PROPERTY, init=False, repr=False)


@dataclass(eq=False)
class Model:
    """
    Object type with named properties.

    An empty ``name`` marks an anonymous model that is emitted inline.
    ``indexer`` is the value type of additional properties, if allowed.
    """

    name: str
    properties: Dict[str, ModelProperty] = field(default_factory=dict)
    base_model: Optional["Model"] = field(default=None, repr=False)
    indexer: Optional["SchemaType"] = field(default=None, repr=False)
    description: Optional[str] = None
    kind: TypeKind = field(default=TypeKind.MODEL, init=False, repr=False)

    @property
    def is_anonymous(self) -> bool:
        return not self.name

    def add_property(self, prop: ModelProperty) -> ModelProperty:
        """Attach ``prop`` to this model, keeping insertion order."""
        prop.model = self
        self.properties[prop.name] = prop
        return prop


SchemaType = Union[Model, Scalar, UnionType, ArrayType, Intrinsic]


@dataclass
class SchemaProgram:
    """A loaded schema: named models in declaration order plus shared scalars."""

    models: Dict[str, Model] = field(default_factory=dict)
    scalars: Dict[str, Scalar] = field(default_factory=dict)
    source: Optional[str] = None

    def iter_models(self) -> Iterator[Model]:
        """Yield named models in declaration order."""
        yield from self.models.values()

    def get_model(self, name: str) -> Optional[Model]:
        return self.models.get(name)

    def get_scalar(self, name: str) -> Scalar:
        """Return the shared scalar entity for ``name``, creating it on first use."""
        scalar = self.scalars.get(name)
        if scalar is None:
            scalar = Scalar(name)
            self.scalars[name] = scalar
        return scalar
