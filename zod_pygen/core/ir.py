"""Intermediate Representation (IR) for validator generation.

This module defines dataclasses that describe the schema metadata the
generator consumes (enums, input object types, operation arguments) and
the declarations it produces, independent of where the metadata came from.
"""

import re
from dataclasses import dataclass, field

NULL_TYPE_NAME = "Null"

# Where a candidate type is defined, following the schema metadata layout
SCALAR_LOCATION = "scalar"
INPUT_OBJECT_LOCATION = "inputObjectTypes"
ENUM_LOCATION = "enumTypes"


def pascal_case(name: str) -> str:
    """Convert camelCase or snake_case to PascalCase."""
    s1 = re.sub("(.)([A-Z][a-z]+)", r"\1_\2", name)
    snake = re.sub("([a-z0-9])([A-Z])", r"\1_\2", s1).lower()
    return "".join(word.capitalize() for word in snake.split("_"))


@dataclass(frozen=True)
class IRTypeRef:
    """One candidate type for a field or argument slot."""
    type_name: str
    location: str = SCALAR_LOCATION
    is_list: bool = False

    @property
    def is_null(self) -> bool:
        """True if this candidate is the explicit null marker."""
        return self.location == SCALAR_LOCATION and self.type_name == NULL_TYPE_NAME


@dataclass
class IRInputField:
    """A field of an input object type, or an argument of an operation.

    The order of input_types is significant: union branches are rendered
    in declared order.
    """
    name: str
    input_types: list[IRTypeRef] = field(default_factory=list)
    is_required: bool = True
    is_nullable: bool = False
    is_optional: bool | None = None
    # Raw zod text inserted verbatim by the compiler
    validator: str | None = None
    custom_errors: str | None = None
    description: str | None = None

    def __post_init__(self):
        if self.is_optional is None:
            self.is_optional = not self.is_required

    @property
    def non_null_types(self) -> list[IRTypeRef]:
        """Candidate types without the null marker, in declared order."""
        return [t for t in self.input_types if not t.is_null]


@dataclass
class IRInputType:
    """Represents an input object type; one generated declaration."""
    name: str
    fields: list[IRInputField] = field(default_factory=list)
    description: str | None = None


@dataclass
class IREnum:
    """Represents an enum type.

    origin is "schema" for enums the schema defines natively and "model"
    for enums declared in the user's data model.
    """
    name: str
    values: list[str] = field(default_factory=list)
    origin: str = "model"
    description: str | None = None


@dataclass
class IROperation:
    """Represents a root query or mutation field and its arguments."""
    name: str
    operation_type: str  # 'query' or 'mutation'
    arguments: list[IRInputField] = field(default_factory=list)
    arg_name: str = ""
    description: str | None = None

    def __post_init__(self):
        if not self.arg_name:
            self.arg_name = f"{pascal_case(self.name)}Args"


@dataclass
class IRSchema:
    """Complete schema metadata snapshot for one generation run."""
    scalars: set[str] = field(default_factory=set)
    enums: dict[str, IREnum] = field(default_factory=dict)
    inputs: dict[str, IRInputType] = field(default_factory=dict)
    queries: list[IROperation] = field(default_factory=list)
    mutations: list[IROperation] = field(default_factory=list)

    @property
    def schema_enums(self) -> list[IREnum]:
        """Enums defined natively by the schema, in declared order."""
        return [e for e in self.enums.values() if e.origin == "schema"]

    @property
    def model_enums(self) -> list[IREnum]:
        """Enums defined in the user's data model, in declared order."""
        return [e for e in self.enums.values() if e.origin != "schema"]

    @property
    def all_operations(self) -> list[IROperation]:
        """Return all queries and mutations."""
        return self.queries + self.mutations


@dataclass(frozen=True)
class Declaration:
    """One named, typed, fully compiled validator expression."""
    name: str
    body: str
    type_annotation: str | None = None
    kind: str = "input"  # 'enum', 'input' or 'args'
