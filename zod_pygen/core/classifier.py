"""Classification of candidate type descriptors.

Every well-formed candidate type falls into exactly one category:

- ScalarKind: a primitive rendered with a zod constructor (``z.string()``)
- ReferenceKind: an enum or input object declared elsewhere in the output
- NullKind: the explicit null marker (``z.null()``)
"""

from dataclasses import dataclass

from .errors import UnrecognizedTypeDescriptor
from .ir import ENUM_LOCATION, INPUT_OBJECT_LOCATION, SCALAR_LOCATION, IRTypeRef
from .scalars import ScalarRegistry

REFERENCE_LOCATIONS = (INPUT_OBJECT_LOCATION, ENUM_LOCATION)


@dataclass(frozen=True)
class ScalarKind:
    zod_type: str


@dataclass(frozen=True)
class ReferenceKind:
    name: str


@dataclass(frozen=True)
class NullKind:
    zod_type: str = "null"


TypeKind = ScalarKind | ReferenceKind | NullKind


def classify(type_ref: IRTypeRef, scalars: ScalarRegistry) -> TypeKind:
    """Return the category of a candidate type.

    Raises:
        UnrecognizedTypeDescriptor: if the location is unknown or the
            scalar has no registered handler.
    """
    if type_ref.is_null:
        return NullKind()
    if type_ref.location in REFERENCE_LOCATIONS:
        return ReferenceKind(type_ref.type_name)
    if type_ref.location == SCALAR_LOCATION:
        zod_type = scalars.zod_type(type_ref.type_name)
        if zod_type:
            return ScalarKind(zod_type)
    raise UnrecognizedTypeDescriptor(type_ref.type_name, type_ref.location)
