"""Compilation of fields and arguments into zod validator expressions.

A field with one non-null candidate type renders that candidate directly
and applies the modifier chain inline:

    email: z.string(),
    ids: z.number().array().optional().nullable(),

A field with several candidates renders a union; modifiers are withheld
from the branches and applied once on the union:

    where: z.union([ z.number(),z.lazy(() => StringFilter), ]).optional(),
"""

from .classifier import NullKind, ReferenceKind, ScalarKind, TypeKind, classify
from .errors import MissingCandidateTypes, UnrecognizedTypeDescriptor
from .ir import IRInputField, IRTypeRef
from .scalars import ScalarRegistry

FIELD_SEPARATOR = ","


def _modifiers(is_list: bool, is_optional: bool, is_nullable: bool) -> str:
    """Build the suffix chain; .array() always precedes optional/nullable."""
    chain = ""
    if is_list:
        chain += ".array()"
    if is_optional:
        chain += ".optional()"
    if is_nullable:
        chain += ".nullable()"
    return chain


def write_scalar_type(
    kind: TypeKind,
    type_ref: IRTypeRef,
    *,
    is_optional: bool = False,
    is_nullable: bool = False,
    validator: str | None = None,
    custom_errors: str | None = None,
) -> str | None:
    """Render a scalar candidate, or return None for any other kind.

    custom_errors is passed as the constructor argument and validator is
    appended right after the constructor call, both verbatim.
    """
    if not isinstance(kind, ScalarKind):
        return None
    return (
        f"z.{kind.zod_type}({custom_errors or ''})"
        f"{validator or ''}"
        f"{_modifiers(type_ref.is_list, is_optional, is_nullable)}"
        f"{FIELD_SEPARATOR}"
    )


def write_non_scalar_type(
    kind: TypeKind,
    type_ref: IRTypeRef,
    *,
    is_optional: bool = False,
    is_nullable: bool = False,
    defer_reference: bool = True,
) -> str | None:
    """Render an enum or input object reference, or return None."""
    if not isinstance(kind, ReferenceKind):
        return None
    # z.lazy defers the lookup so input types may reference each other
    base = f"z.lazy(() => {kind.name})" if defer_reference else kind.name
    return f"{base}{_modifiers(type_ref.is_list, is_optional, is_nullable)}{FIELD_SEPARATOR}"


def write_null_type(
    kind: TypeKind,
    *,
    is_optional: bool = False,
    is_nullable: bool = False,
) -> str | None:
    """Render the null marker, or return None for any other kind."""
    if not isinstance(kind, NullKind):
        return None
    return f"z.{kind.zod_type}(){_modifiers(False, is_optional, is_nullable)}{FIELD_SEPARATOR}"


def _render_candidate(
    kind: TypeKind,
    type_ref: IRTypeRef,
    field: IRInputField,
    defer_reference: bool,
    is_optional: bool,
    is_nullable: bool,
) -> str:
    if isinstance(kind, ScalarKind):
        return write_scalar_type(
            kind,
            type_ref,
            is_optional=is_optional,
            is_nullable=is_nullable,
            validator=field.validator,
            custom_errors=field.custom_errors,
        )
    if isinstance(kind, ReferenceKind):
        return write_non_scalar_type(
            kind,
            type_ref,
            is_optional=is_optional,
            is_nullable=is_nullable,
            defer_reference=defer_reference,
        )
    if isinstance(kind, NullKind):
        return write_null_type(kind, is_optional=is_optional, is_nullable=is_nullable)
    raise TypeError(f"Unhandled type kind: {kind!r}")


def compile_field(
    field: IRInputField,
    scalars: ScalarRegistry,
    *,
    defer_reference: bool = True,
    owner: str | None = None,
) -> str:
    """Compile one field or argument into its zod expression.

    Args:
        field: The field or argument to compile
        scalars: Registry used to resolve scalar constructors
        defer_reference: Wrap references in z.lazy(); True for input object
                         fields, False for operation arguments
        owner: Name of the enclosing declaration, used in error messages

    Returns:
        The expression followed by the field separator, without the
        field name prefix.

    Raises:
        MissingCandidateTypes: if every candidate is the null marker
        UnrecognizedTypeDescriptor: if a candidate cannot be classified
    """
    candidates = field.non_null_types
    if not candidates:
        raise MissingCandidateTypes(owner, field.name)

    try:
        kinds = [classify(type_ref, scalars) for type_ref in candidates]
    except UnrecognizedTypeDescriptor as e:
        raise e.with_context(owner, field.name) from e

    if len(candidates) > 1:
        # Branches carry no modifiers; the union applies them once
        branches = "".join(
            _render_candidate(kind, type_ref, field, defer_reference, False, False)
            for kind, type_ref in zip(kinds, candidates)
        )
        return (
            f"z.union([ {branches} ])"
            f"{_modifiers(False, not field.is_required, field.is_nullable)}"
            f"{FIELD_SEPARATOR}"
        )

    return _render_candidate(
        kinds[0],
        candidates[0],
        field,
        defer_reference,
        bool(field.is_optional),
        field.is_nullable,
    )
