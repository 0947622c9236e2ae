"""Scalar handlers for zod code generation.

Provides a protocol for defining how schema scalars map to zod constructors.

Example usage:
    from zod_pygen.core.scalars import ScalarRegistry, SimpleScalar

    registry = ScalarRegistry()
    registry.register("Email", SimpleScalar("string"))

    # Create custom handler
    class MoneyHandler(ScalarHandler):
        zod_type = "number"

    registry.register("Money", MoneyHandler())
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ScalarHandler(Protocol):
    """Protocol for scalar handlers.

    Attributes:
        zod_type: The zod constructor name without the ``z.`` prefix
                  (e.g., "string", "date")
    """

    zod_type: str


class SimpleScalar:
    """Handler that maps a scalar onto a single zod constructor."""

    def __init__(self, zod_type: str):
        self.zod_type = zod_type

    def __repr__(self):
        return f"SimpleScalar({self.zod_type!r})"


class StringHandler:
    zod_type = "string"


class NumberHandler:
    zod_type = "number"


class BigIntHandler:
    zod_type = "bigint"


class BooleanHandler:
    zod_type = "boolean"


class DateHandler:
    """Handler for DateTime and Date scalars."""

    zod_type = "date"


class AnyHandler:
    """Handler for JSON-like scalars (no runtime checks)."""

    zod_type = "any"


class ScalarRegistry:
    """Registry for scalar handlers.

    Manages the mapping between schema scalar names and their handlers.

    Example:
        registry = ScalarRegistry()
        handler = registry.get("DateTime")
        if handler:
            zod_type = handler.zod_type  # "date"
    """

    def __init__(self):
        self._handlers: dict[str, ScalarHandler] = {}
        # Register default handlers
        self._register_defaults()

    def _register_defaults(self):
        """Register built-in GraphQL and Prisma scalars."""
        for name in ("String", "ID", "UUID"):
            self.register(name, StringHandler())
        for name in ("Int", "Float", "Decimal"):
            self.register(name, NumberHandler())
        self.register("BigInt", BigIntHandler())
        self.register("Boolean", BooleanHandler())
        self.register("DateTime", DateHandler())
        self.register("Date", DateHandler())
        for name in ("Json", "JSON", "JSONObject", "Bytes"):
            self.register(name, AnyHandler())

    def register(self, scalar_name: str, handler: ScalarHandler):
        """Register a handler for a scalar type."""
        self._handlers[scalar_name] = handler

    def register_all(self, mapping: dict[str, str]):
        """Register plain name -> zod constructor mappings."""
        for scalar_name, zod_type in mapping.items():
            self.register(scalar_name, SimpleScalar(zod_type))

    def copy(self) -> "ScalarRegistry":
        """Return a registry with the same handlers."""
        registry = ScalarRegistry()
        registry._handlers = dict(self._handlers)
        return registry

    def get(self, scalar_name: str) -> ScalarHandler | None:
        """Get the handler for a scalar type, or None if not registered."""
        return self._handlers.get(scalar_name)

    def has(self, scalar_name: str) -> bool:
        """Check if a handler is registered for a scalar type."""
        return scalar_name in self._handlers

    def zod_type(self, scalar_name: str) -> str | None:
        """Return the zod constructor name for a scalar, or None."""
        handler = self.get(scalar_name)
        return handler.zod_type if handler else None
