"""JSON metadata snapshot loader.

Reads the subset of a Prisma DMMF document the generator consumes and
converts it into an IRSchema. Unlike SDL files, a snapshot can list several
candidate types per field, which is how unions reach the compiler:

    {
      "schema": {
        "enumTypes": {"prisma": [{"name": "SortOrder", "values": ["asc", "desc"]}]},
        "inputObjectTypes": {"prisma": [...]},
        "outputObjectTypes": {"prisma": [{"name": "Query", "fields": [...]}]}
      },
      "datamodel": {"enums": [{"name": "role", "values": [{"name": "USER"}]}]}
    }
"""

import json
import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import SnapshotError
from .ir import (
    SCALAR_LOCATION,
    IREnum,
    IRInputField,
    IRInputType,
    IROperation,
    IRSchema,
    IRTypeRef,
    pascal_case,
)

logger = logging.getLogger(__name__)

ROOT_OPERATION_TYPES = {"Query": "query", "Mutation": "mutation"}


class _SnapshotModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class SnapshotTypeRef(_SnapshotModel):
    type: str
    location: str = SCALAR_LOCATION
    is_list: bool = Field(default=False, alias="isList")


class SnapshotField(_SnapshotModel):
    """An input object field or an operation argument."""
    name: str
    input_types: list[SnapshotTypeRef] = Field(alias="inputTypes")
    is_required: bool = Field(default=False, alias="isRequired")
    is_nullable: bool = Field(default=False, alias="isNullable")
    is_optional: bool | None = Field(default=None, alias="isOptional")
    zod_validator_string: str | None = Field(default=None, alias="zodValidatorString")
    zod_custom_errors: str | None = Field(default=None, alias="zodCustomErrors")


class SnapshotInputType(_SnapshotModel):
    name: str
    fields: list[SnapshotField] = Field(default_factory=list)


class SnapshotOperation(_SnapshotModel):
    name: str
    arg_name: str | None = Field(default=None, alias="argName")
    args: list[SnapshotField] = Field(default_factory=list)


class SnapshotOutputType(_SnapshotModel):
    name: str
    fields: list[SnapshotOperation] = Field(default_factory=list)


class SnapshotEnumValue(_SnapshotModel):
    name: str


class SnapshotEnum(_SnapshotModel):
    name: str
    # Data model enums list values as {"name": ...} objects
    values: list[SnapshotEnumValue | str] = Field(default_factory=list)

    @property
    def value_names(self) -> list[str]:
        return [v if isinstance(v, str) else v.name for v in self.values]


class SnapshotEnumTypes(_SnapshotModel):
    prisma: list[SnapshotEnum] = Field(default_factory=list)


class SnapshotInputObjectTypes(_SnapshotModel):
    prisma: list[SnapshotInputType] = Field(default_factory=list)


class SnapshotOutputObjectTypes(_SnapshotModel):
    prisma: list[SnapshotOutputType] = Field(default_factory=list)


class SnapshotSchema(_SnapshotModel):
    enum_types: SnapshotEnumTypes = Field(default_factory=SnapshotEnumTypes, alias="enumTypes")
    input_object_types: SnapshotInputObjectTypes = Field(
        default_factory=SnapshotInputObjectTypes, alias="inputObjectTypes"
    )
    output_object_types: SnapshotOutputObjectTypes = Field(
        default_factory=SnapshotOutputObjectTypes, alias="outputObjectTypes"
    )


class SnapshotDatamodel(_SnapshotModel):
    enums: list[SnapshotEnum] = Field(default_factory=list)


class Snapshot(_SnapshotModel):
    schema_: SnapshotSchema = Field(default_factory=SnapshotSchema, alias="schema")
    datamodel: SnapshotDatamodel = Field(default_factory=SnapshotDatamodel)


def _convert_field(snapshot_field: SnapshotField) -> IRInputField:
    return IRInputField(
        name=snapshot_field.name,
        input_types=[
            IRTypeRef(t.type, t.location, t.is_list) for t in snapshot_field.input_types
        ],
        is_required=snapshot_field.is_required,
        is_nullable=snapshot_field.is_nullable,
        is_optional=snapshot_field.is_optional,
        validator=snapshot_field.zod_validator_string,
        custom_errors=snapshot_field.zod_custom_errors,
    )


def snapshot_to_ir(snapshot: Snapshot) -> IRSchema:
    """Convert a validated snapshot into the IR."""
    ir = IRSchema()
    schema = snapshot.schema_

    for enum in schema.enum_types.prisma:
        ir.enums[enum.name] = IREnum(name=enum.name, values=enum.value_names, origin="schema")
    for enum in snapshot.datamodel.enums:
        name = pascal_case(enum.name)
        ir.enums[name] = IREnum(name=name, values=enum.value_names, origin="model")

    for input_type in schema.input_object_types.prisma:
        ir.inputs[input_type.name] = IRInputType(
            name=input_type.name,
            fields=[_convert_field(f) for f in input_type.fields],
        )

    for output_type in schema.output_object_types.prisma:
        op_type = ROOT_OPERATION_TYPES.get(output_type.name)
        if op_type is None:
            continue
        operations = ir.queries if op_type == "query" else ir.mutations
        for op in output_type.fields:
            operations.append(
                IROperation(
                    name=op.name,
                    operation_type=op_type,
                    arguments=[_convert_field(a) for a in op.args],
                    arg_name=op.arg_name or "",
                )
            )

    logger.debug(
        "Loaded snapshot with %d enums, %d inputs, %d operations",
        len(ir.enums), len(ir.inputs), len(ir.all_operations),
    )
    return ir


def load_snapshot_data(data: dict) -> IRSchema:
    """Validate a decoded snapshot document and convert it to IR.

    Raises:
        SnapshotError: if the document does not match the expected shape
    """
    try:
        snapshot = Snapshot.model_validate(data)
    except ValidationError as e:
        raise SnapshotError(f"Invalid metadata snapshot: {e}") from e
    return snapshot_to_ir(snapshot)


def load_snapshot(path: str | Path) -> IRSchema:
    """Load a JSON metadata snapshot from disk.

    Raises:
        SnapshotError: if the file is not UTF-8 encoded JSON or not a valid snapshot
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise SnapshotError(f"Error parsing {path.name}: {e}") from e
    return load_snapshot_data(data)
