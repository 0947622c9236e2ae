"""GraphQL schema parser using graphql-core.

Parses .graphqls files and produces an IRSchema. Input object types become
input declarations, Query/Mutation fields become argument sets.

Custom validation is attached with the @zod directive:

    input UserCreateInput {
      email: String! @zod(validator: ".email()", errors: "{ required_error: 'Email is required' }")
    }
"""

import dataclasses
import logging
import os
from typing import Any

from graphql import (
    EnumTypeDefinitionNode,
    GraphQLError,
    InputObjectTypeDefinitionNode,
    InputObjectTypeExtensionNode,
    InputValueDefinitionNode,
    ListTypeNode,
    NamedTypeNode,
    NonNullTypeNode,
    ObjectTypeDefinitionNode,
    ObjectTypeExtensionNode,
    ScalarTypeDefinitionNode,
    TypeNode,
    parse,
    value_from_ast_untyped,
)

from .errors import SchemaParseError
from .ir import (
    ENUM_LOCATION,
    INPUT_OBJECT_LOCATION,
    SCALAR_LOCATION,
    IREnum,
    IRInputField,
    IRInputType,
    IROperation,
    IRSchema,
    IRTypeRef,
)

logger = logging.getLogger(__name__)

SCHEMA_EXTENSIONS = (".graphqls", ".graphql")
ZOD_DIRECTIVE = "zod"


class SchemaParser:
    """Parses GraphQL schema files into IR."""

    def __init__(self, schema_path: str):
        """Initialize a parser with a path to a schema file or directory."""
        self.schema_path = schema_path
        self.ir = IRSchema()
        self.current_file = ""

    def parse_all(self) -> IRSchema:
        """Parse all schema files and return the complete IR."""
        for file_path in self._collect_schema_files():
            self.current_file = os.path.basename(file_path)
            with open(file_path) as f:
                self.parse_source(f.read())

        self._resolve_locations()
        return self.ir

    def parse_source(self, content: str):
        """Parse one SDL document into the IR being built."""
        try:
            ast = parse(content)
        except GraphQLError as e:
            logger.error("Error parsing %s: %s", self.current_file, e.message)
            raise SchemaParseError(self.current_file or "<string>", e.message) from e
        self._process_ast(ast)

    def _collect_schema_files(self) -> list[str]:
        """Collect all schema files from path."""
        files = []
        if os.path.isfile(self.schema_path):
            if self.schema_path.endswith(SCHEMA_EXTENSIONS):
                files.append(self.schema_path)
        else:
            for root, _, filenames in os.walk(self.schema_path):
                for filename in filenames:
                    if filename.endswith(SCHEMA_EXTENSIONS):
                        files.append(os.path.join(root, filename))
        return sorted(files)

    def _process_ast(self, ast):
        """Process GraphQL AST and populate IR."""
        for definition in ast.definitions:
            if isinstance(definition, ScalarTypeDefinitionNode):
                self.ir.scalars.add(definition.name.value)
            elif isinstance(definition, EnumTypeDefinitionNode):
                self._process_enum(definition)
            elif isinstance(definition, (ObjectTypeDefinitionNode, ObjectTypeExtensionNode)):
                # Only the root operation types carry arguments we validate
                if definition.name.value in ("Query", "Mutation"):
                    self._process_operations(definition)
            elif isinstance(
                definition, (InputObjectTypeDefinitionNode, InputObjectTypeExtensionNode)
            ):
                self._process_input_type(definition)

    def _process_enum(self, node: EnumTypeDefinitionNode):
        name = node.name.value
        self.ir.enums[name] = IREnum(
            name=name,
            values=[v.name.value for v in node.values],
            origin="model",
            description=node.description.value if node.description else None,
        )

    def _process_input_type(
        self, node: InputObjectTypeDefinitionNode | InputObjectTypeExtensionNode
    ):
        name = node.name.value
        fields = [self._process_input_value(f) for f in node.fields or []]
        existing = self.ir.inputs.get(name)
        if existing:
            # Merge 'extend input' fields, keeping declared order
            existing_names = {f.name for f in existing.fields}
            existing.fields.extend(f for f in fields if f.name not in existing_names)
            return
        # Extension nodes have no description
        description = getattr(node, "description", None)
        self.ir.inputs[name] = IRInputType(
            name=name,
            fields=fields,
            description=description.value if description else None,
        )

    def _process_operations(
        self, node: ObjectTypeDefinitionNode | ObjectTypeExtensionNode
    ):
        """Process Query or Mutation type into operations."""
        op_type = "query" if node.name.value == "Query" else "mutation"
        for field in node.fields or []:
            op = IROperation(
                name=field.name.value,
                operation_type=op_type,
                arguments=[self._process_input_value(a) for a in field.arguments or []],
                description=field.description.value if field.description else None,
            )
            if op_type == "query":
                self.ir.queries.append(op)
            else:
                self.ir.mutations.append(op)

    def _process_input_value(self, node: InputValueDefinitionNode) -> IRInputField:
        """Convert an input field or argument definition into IR."""
        type_info = self._get_type_info(node.type)
        is_non_null = type_info["is_non_null"]
        has_default = node.default_value is not None
        directive = self._get_zod_directive(node)
        return IRInputField(
            name=node.name.value,
            # Location is resolved once every file has been parsed
            input_types=[IRTypeRef(type_info["name"], SCALAR_LOCATION, type_info["is_list"])],
            is_required=is_non_null and not has_default,
            is_nullable=not is_non_null,
            validator=directive.get("validator"),
            custom_errors=directive.get("errors"),
            description=node.description.value if node.description else None,
        )

    @staticmethod
    def _get_zod_directive(node: InputValueDefinitionNode) -> dict[str, Any]:
        """Return the arguments of the @zod directive, if present."""
        for directive in node.directives or []:
            if directive.name.value == ZOD_DIRECTIVE:
                return {
                    arg.name.value: value_from_ast_untyped(arg.value)
                    for arg in directive.arguments or []
                }
        return {}

    @staticmethod
    def _get_type_info(type_node: TypeNode) -> dict[str, Any]:
        """Extract the type name, is_list, and is_non_null from the type node."""
        is_non_null = False
        is_list = False

        # NonNull wrapper means required
        if isinstance(type_node, NonNullTypeNode):
            is_non_null = True
            type_node = type_node.type

        # List wrapper; item nullability is not tracked
        while isinstance(type_node, ListTypeNode):
            is_list = True
            type_node = type_node.type
            if isinstance(type_node, NonNullTypeNode):
                type_node = type_node.type

        assert isinstance(type_node, NamedTypeNode), f"Expected NamedTypeNode, got {type(type_node)}"

        return {
            "name": type_node.name.value,
            "is_list": is_list,
            "is_non_null": is_non_null,
        }

    def _resolve_locations(self):
        """Point each candidate type at the enum or input it names."""
        fields = [f for t in self.ir.inputs.values() for f in t.fields]
        fields += [a for op in self.ir.all_operations for a in op.arguments]
        for field in fields:
            field.input_types = [self._resolve(t) for t in field.input_types]

    def _resolve(self, type_ref: IRTypeRef) -> IRTypeRef:
        if type_ref.type_name in self.ir.enums:
            return dataclasses.replace(type_ref, location=ENUM_LOCATION)
        if type_ref.type_name in self.ir.inputs:
            return dataclasses.replace(type_ref, location=INPUT_OBJECT_LOCATION)
        return type_ref
