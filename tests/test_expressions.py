"""Tests for compiling fields into zod expressions."""

import pytest

from zod_pygen.core.classifier import NullKind, ReferenceKind, ScalarKind
from zod_pygen.core.errors import MissingCandidateTypes, UnrecognizedTypeDescriptor
from zod_pygen.core.expressions import (
    compile_field,
    write_non_scalar_type,
    write_null_type,
    write_scalar_type,
)
from zod_pygen.core.ir import IRInputField, IRTypeRef
from zod_pygen.core.scalars import ScalarRegistry

STRING = IRTypeRef("String")
INT = IRTypeRef("Int")
INT_LIST = IRTypeRef("Int", is_list=True)
NULL = IRTypeRef("Null")
STRING_FILTER = IRTypeRef("StringFilter", "inputObjectTypes")
SORT_ORDER = IRTypeRef("SortOrder", "enumTypes")


@pytest.fixture
def registry():
    return ScalarRegistry()


# =============================================================================
# Branch emitters
# =============================================================================


class TestBranchEmitters:
    """Each emitter renders its own kind and ignores the others."""

    def test_scalar_emitter(self):
        assert write_scalar_type(ScalarKind("string"), STRING) == "z.string(),"

    def test_scalar_emitter_skips_reference(self):
        assert write_scalar_type(ReferenceKind("StringFilter"), STRING_FILTER) is None

    def test_scalar_emitter_custom_text_positions(self):
        result = write_scalar_type(
            ScalarKind("string"),
            IRTypeRef("String", is_list=True),
            is_optional=True,
            validator=".min(1)",
            custom_errors="{ invalid_type_error: 'Not a string' }",
        )
        assert result == "z.string({ invalid_type_error: 'Not a string' }).min(1).array().optional(),"

    def test_reference_emitter_lazy(self):
        result = write_non_scalar_type(ReferenceKind("StringFilter"), STRING_FILTER)
        assert result == "z.lazy(() => StringFilter),"

    def test_reference_emitter_direct(self):
        result = write_non_scalar_type(
            ReferenceKind("StringFilter"), STRING_FILTER, defer_reference=False
        )
        assert result == "StringFilter,"

    def test_reference_emitter_skips_scalar(self):
        assert write_non_scalar_type(ScalarKind("number"), INT) is None

    def test_null_emitter(self):
        assert write_null_type(NullKind()) == "z.null(),"

    def test_null_emitter_modifiers(self):
        result = write_null_type(NullKind(), is_optional=True, is_nullable=True)
        assert result == "z.null().optional().nullable(),"

    def test_null_emitter_skips_scalar(self):
        assert write_null_type(ScalarKind("number")) is None


# =============================================================================
# Single candidate
# =============================================================================


class TestSingleCandidate:
    """Fields with exactly one non-null candidate type."""

    def test_plain_scalar_has_no_suffixes(self, registry):
        field = IRInputField(name="email", input_types=[STRING])
        assert compile_field(field, registry) == "z.string(),"

    def test_optional_nullable_list(self, registry):
        field = IRInputField(
            name="ids", input_types=[INT_LIST], is_required=False, is_nullable=True
        )
        assert compile_field(field, registry) == "z.number().array().optional().nullable(),"

    def test_optional_only(self, registry):
        field = IRInputField(name="name", input_types=[STRING], is_required=False)
        assert compile_field(field, registry) == "z.string().optional(),"

    def test_nullable_only(self, registry):
        field = IRInputField(name="bio", input_types=[STRING], is_nullable=True)
        assert compile_field(field, registry) == "z.string().nullable(),"

    def test_explicit_optional_flag(self, registry):
        # Non-null with a default value: omittable, not nullable
        field = IRInputField(
            name="role", input_types=[SORT_ORDER], is_required=False, is_optional=True
        )
        assert compile_field(field, registry) == "z.lazy(() => SortOrder).optional(),"

    def test_null_marker_is_filtered(self, registry):
        field = IRInputField(
            name="bio", input_types=[STRING, NULL], is_required=False, is_nullable=True
        )
        assert compile_field(field, registry) == "z.string().optional().nullable(),"

    def test_null_marker_first_is_filtered(self, registry):
        field = IRInputField(name="bio", input_types=[NULL, STRING], is_nullable=True)
        assert compile_field(field, registry) == "z.string().nullable(),"

    def test_lazy_list_reference(self, registry):
        field = IRInputField(
            name="AND",
            input_types=[IRTypeRef("UserWhereInput", "inputObjectTypes", is_list=True)],
            is_required=False,
        )
        assert compile_field(field, registry) == "z.lazy(() => UserWhereInput).array().optional(),"

    def test_argument_reference_is_direct(self, registry):
        field = IRInputField(name="orderBy", input_types=[SORT_ORDER], is_required=False)
        result = compile_field(field, registry, defer_reference=False)
        assert result == "SortOrder.optional(),"
        assert "z.lazy" not in result

    def test_custom_validator_and_errors(self, registry):
        field = IRInputField(
            name="email",
            input_types=[STRING],
            validator=".email()",
            custom_errors="{ required_error: 'Email is required' }",
        )
        result = compile_field(field, registry)
        assert result == "z.string({ required_error: 'Email is required' }).email(),"

    def test_custom_text_ignored_for_reference(self, registry):
        field = IRInputField(name="where", input_types=[STRING_FILTER], validator=".min(1)")
        assert compile_field(field, registry) == "z.lazy(() => StringFilter),"


# =============================================================================
# Unions
# =============================================================================


class TestUnion:
    """Fields with more than one non-null candidate type."""

    def test_union_modifiers_applied_once(self, registry):
        field = IRInputField(
            name="id",
            input_types=[INT, STRING_FILTER],
            is_required=False,
            is_nullable=True,
        )
        result = compile_field(field, registry)
        assert result == "z.union([ z.number(),z.lazy(() => StringFilter), ]).optional().nullable(),"
        assert result.count(".optional()") == 1
        assert result.count(".nullable()") == 1

    def test_union_without_modifiers(self, registry):
        field = IRInputField(name="id", input_types=[INT, STRING_FILTER])
        assert compile_field(field, registry) == "z.union([ z.number(),z.lazy(() => StringFilter), ]),"

    def test_union_preserves_order(self, registry):
        field = IRInputField(name="id", input_types=[STRING_FILTER, STRING, INT])
        result = compile_field(field, registry)
        assert result == "z.union([ z.lazy(() => StringFilter),z.string(),z.number(), ]),"

    def test_union_drops_null_marker(self, registry):
        field = IRInputField(
            name="id", input_types=[INT, NULL, STRING_FILTER], is_nullable=True
        )
        result = compile_field(field, registry)
        assert result == "z.union([ z.number(),z.lazy(() => StringFilter), ]).nullable(),"
        assert "z.null()" not in result

    def test_union_branches_keep_list_modifier(self, registry):
        where = IRTypeRef("UserWhereInput", "inputObjectTypes")
        where_list = IRTypeRef("UserWhereInput", "inputObjectTypes", is_list=True)
        field = IRInputField(name="AND", input_types=[where, where_list], is_required=False)
        result = compile_field(field, registry)
        assert result == (
            "z.union([ z.lazy(() => UserWhereInput),"
            "z.lazy(() => UserWhereInput).array(), ]).optional(),"
        )

    def test_union_of_arguments_is_direct(self, registry):
        field = IRInputField(
            name="id",
            input_types=[INT, STRING_FILTER],
            is_required=False,
            is_nullable=True,
        )
        result = compile_field(field, registry, defer_reference=False)
        assert result == "z.union([ z.number(),StringFilter, ]).optional().nullable(),"

    def test_union_scalar_branch_keeps_custom_text(self, registry):
        field = IRInputField(
            name="name",
            input_types=[STRING, STRING_FILTER],
            validator=".max(20)",
        )
        result = compile_field(field, registry)
        assert result == "z.union([ z.string().max(20),z.lazy(() => StringFilter), ]),"


# =============================================================================
# Malformed metadata
# =============================================================================


class TestMalformedMetadata:
    """Malformed fields fail the run instead of producing partial output."""

    def test_only_null_candidate(self, registry):
        field = IRInputField(name="ghost", input_types=[NULL])
        with pytest.raises(MissingCandidateTypes, match="UserCreateInput.ghost"):
            compile_field(field, registry, owner="UserCreateInput")

    def test_no_candidates(self, registry):
        with pytest.raises(MissingCandidateTypes):
            compile_field(IRInputField(name="ghost"), registry)

    def test_unrecognized_descriptor_names_field(self, registry):
        field = IRInputField(name="email", input_types=[IRTypeRef("Email")])
        with pytest.raises(UnrecognizedTypeDescriptor) as exc_info:
            compile_field(field, registry, owner="UserCreateInput")
        error = exc_info.value
        assert error.owner == "UserCreateInput"
        assert error.field == "email"
        assert "UserCreateInput.email" in str(error)

    def test_unrecognized_branch_in_union(self, registry):
        field = IRInputField(
            name="id", input_types=[INT, IRTypeRef("IntFieldRef", "fieldRefTypes")]
        )
        with pytest.raises(UnrecognizedTypeDescriptor, match="IntFieldRef"):
            compile_field(field, registry, owner="UserWhereInput")
