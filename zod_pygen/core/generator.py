"""Validator generator for schema metadata.

Walks the IR and produces zod declarations in dependency order:

1. Enums (schema enums, then data model enums)
2. Input object types, whose references are wrapped in z.lazy()
3. Query and mutation argument sets, which reference inputs directly

Later groups may reference earlier ones by name, so the order is fixed.
"""

import logging
from dataclasses import dataclass, field

from .config import GeneratorConfig
from .errors import UnrecognizedTypeDescriptor
from .expressions import compile_field
from .hooks import HookRunner
from .ir import SCALAR_LOCATION, Declaration, IREnum, IRInputField, IRSchema
from .scalars import ScalarRegistry

logger = logging.getLogger(__name__)

INDENT = "  "

SECTION_TITLES = {
    "enum": "ENUMS",
    "input": "INPUT TYPES",
    "args": "ARGS",
}


@dataclass
class DeclarationSection:
    """A group of declarations rendered under one banner."""
    title: str
    declarations: list[Declaration] = field(default_factory=list)


def build_object_body(
    owner: str,
    fields: list[IRInputField],
    scalars: ScalarRegistry,
    defer_reference: bool,
) -> str:
    """Render a strict z.object() with one compiled entry per field."""
    if not fields:
        return "z.object({}).strict()"

    lines = ["z.object({"]
    for input_field in fields:
        expression = compile_field(
            input_field, scalars, defer_reference=defer_reference, owner=owner
        )
        lines.append(f"{INDENT}{input_field.name}: {expression}")
    lines.append("}).strict()")
    return "\n".join(lines)


def build_object_declaration(
    name: str,
    fields: list[IRInputField],
    scalars: ScalarRegistry,
    config: GeneratorConfig,
    *,
    kind: str,
    defer_reference: bool,
) -> Declaration:
    """Wrap a field set into one typed declaration."""
    return Declaration(
        name=name,
        body=build_object_body(name, fields, scalars, defer_reference),
        type_annotation=config.type_annotation(name),
        kind=kind,
    )


def build_enum_declaration(enum: IREnum, config: GeneratorConfig) -> Declaration:
    """Re-export the schema's enum object through z.nativeEnum()."""
    namespace = config.schema_namespace if enum.origin == "schema" else config.model_namespace
    return Declaration(
        name=enum.name,
        body=f"z.nativeEnum({namespace}.{enum.name})",
        kind="enum",
    )


class ValidatorGenerator:
    """Generates zod declarations from schema IR.

    Example:
        generator = ValidatorGenerator(ir, GeneratorConfig(model_namespace="Client"))
        for declaration in generator.generate_declarations():
            print(declaration.name, declaration.body)
    """

    def __init__(
        self,
        ir: IRSchema,
        config: GeneratorConfig | None = None,
        hooks: HookRunner | None = None,
        scalars: ScalarRegistry | None = None,
    ):
        """Initialize the generator.

        Args:
            ir: The intermediate representation of the schema
            config: Output options; defaults to GeneratorConfig()
            hooks: Optional hooks; pre-generation hooks run once, lazily
            scalars: Scalar registry; defaults to the built-in registry.
                     It is copied before config.scalars are added
        """
        self.config = config or GeneratorConfig()
        self.hooks = hooks or HookRunner()
        # Config scalars go into a copy so a shared registry is left untouched
        self.scalars = scalars.copy() if scalars is not None else ScalarRegistry()
        self.scalars.register_all(self.config.scalars)
        self._source_ir = ir
        self._ir: IRSchema | None = None

    @property
    def ir(self) -> IRSchema:
        """The IR after pre-generation hooks."""
        if self._ir is None:
            self._ir = self.hooks.run_pre_hooks(self._source_ir)
        return self._ir

    def _build_object(
        self, name: str, fields: list[IRInputField], kind: str, defer_reference: bool
    ) -> Declaration:
        try:
            return build_object_declaration(
                name,
                fields,
                self.scalars,
                self.config,
                kind=kind,
                defer_reference=defer_reference,
            )
        except UnrecognizedTypeDescriptor as e:
            if e.location == SCALAR_LOCATION and e.type_name in self.ir.scalars:
                raise e.as_declared() from e
            raise

    def generate_enum_declarations(self) -> list[Declaration]:
        """One declaration per schema enum, then per data model enum."""
        enums = self.ir.schema_enums + self.ir.model_enums
        return [build_enum_declaration(enum, self.config) for enum in enums]

    def generate_input_declarations(self) -> list[Declaration]:
        """One declaration per input object type, with lazy references."""
        declarations = []
        for input_type in self.ir.inputs.values():
            logger.debug("Compiling input type %s", input_type.name)
            declarations.append(
                self._build_object(input_type.name, input_type.fields, "input", True)
            )
        return declarations

    def generate_args_declarations(self) -> list[Declaration]:
        """One declaration per query and mutation field's arguments."""
        declarations = []
        for op in self.ir.all_operations:
            logger.debug("Compiling arguments of %s %s", op.operation_type, op.name)
            declarations.append(self._build_object(op.arg_name, op.arguments, "args", False))
        return declarations

    def generate_sections(self) -> list[DeclarationSection]:
        """Build all declarations grouped under their banners."""
        sections = [
            DeclarationSection(SECTION_TITLES["enum"], self.generate_enum_declarations()),
            DeclarationSection(SECTION_TITLES["input"], self.generate_input_declarations()),
            DeclarationSection(SECTION_TITLES["args"], self.generate_args_declarations()),
        ]
        logger.info(
            "Generated %d enum, %d input and %d args declarations",
            *(len(s.declarations) for s in sections),
        )
        return sections

    def generate_declarations(self) -> list[Declaration]:
        """Build all declarations in output order."""
        return [d for section in self.generate_sections() for d in section.declarations]
