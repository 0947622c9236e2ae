"""Tests for scalar handlers."""

import pytest

from zod_pygen.core.scalars import (
    AnyHandler,
    DateHandler,
    ScalarHandler,
    ScalarRegistry,
    SimpleScalar,
)


class TestScalarRegistry:
    """Tests for ScalarRegistry."""

    @pytest.mark.parametrize(
        "scalar_name,zod_type",
        [
            ("String", "string"),
            ("ID", "string"),
            ("UUID", "string"),
            ("Int", "number"),
            ("Float", "number"),
            ("Decimal", "number"),
            ("BigInt", "bigint"),
            ("Boolean", "boolean"),
            ("DateTime", "date"),
            ("Date", "date"),
            ("Json", "any"),
            ("JSON", "any"),
            ("Bytes", "any"),
        ],
    )
    def test_default_mappings(self, scalar_name, zod_type):
        registry = ScalarRegistry()
        assert registry.zod_type(scalar_name) == zod_type

    def test_get_handler(self):
        registry = ScalarRegistry()
        handler = registry.get("DateTime")
        assert handler is not None
        assert handler.zod_type == "date"

    def test_get_nonexistent(self):
        registry = ScalarRegistry()
        assert registry.get("NonExistent") is None
        assert registry.zod_type("NonExistent") is None
        assert not registry.has("NonExistent")

    def test_register_custom(self):
        registry = ScalarRegistry()

        class MoneyHandler:
            zod_type = "number"

        registry.register("Money", MoneyHandler())
        assert registry.has("Money")
        assert registry.zod_type("Money") == "number"

    def test_register_all(self):
        registry = ScalarRegistry()
        registry.register_all({"Email": "string", "Int": "bigint"})
        assert registry.zod_type("Email") == "string"
        # Overrides a default
        assert registry.zod_type("Int") == "bigint"

    def test_registries_are_independent(self):
        first = ScalarRegistry()
        first.register_all({"Email": "string"})
        assert not ScalarRegistry().has("Email")


class TestScalarHandlerProtocol:
    """Tests for protocol compliance."""

    def test_date_handler_is_scalar_handler(self):
        assert isinstance(DateHandler(), ScalarHandler)

    def test_any_handler_is_scalar_handler(self):
        assert isinstance(AnyHandler(), ScalarHandler)

    def test_simple_scalar_is_scalar_handler(self):
        assert isinstance(SimpleScalar("string"), ScalarHandler)

    def test_simple_scalar_repr(self):
        assert repr(SimpleScalar("string")) == "SimpleScalar('string')"


class TestScalarRegistryCopy:
    """Tests for ScalarRegistry.copy()."""

    def test_copy_keeps_handlers(self):
        registry = ScalarRegistry()
        registry.register_all({"Email": "string"})
        assert registry.copy().zod_type("Email") == "string"

    def test_copy_is_independent(self):
        registry = ScalarRegistry()
        copied = registry.copy()
        copied.register_all({"Email": "string"})
        assert not registry.has("Email")
