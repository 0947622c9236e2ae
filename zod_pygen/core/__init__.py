"""Core modules for zod validator generation."""

from .classifier import NullKind, ReferenceKind, ScalarKind, classify
from .config import GeneratorConfig
from .errors import (
    GenerationError,
    MissingCandidateTypes,
    SchemaParseError,
    SnapshotError,
    UnrecognizedTypeDescriptor,
)
from .expressions import compile_field
from .generator import DeclarationSection, ValidatorGenerator
from .hooks import (
    AddHeaderHook,
    FilterTypesHook,
    HookRunner,
    PostGenerateHook,
    PreGenerateHook,
)
from .ir import (
    Declaration,
    IREnum,
    IRInputField,
    IRInputType,
    IROperation,
    IRSchema,
    IRTypeRef,
)
from .parser import SchemaParser
from .scalars import ScalarHandler, ScalarRegistry, SimpleScalar
from .snapshot import load_snapshot, load_snapshot_data
from .writer import ModuleWriter

__all__ = [
    # Config
    "GeneratorConfig",
    # Errors
    "GenerationError",
    "MissingCandidateTypes",
    "SchemaParseError",
    "SnapshotError",
    "UnrecognizedTypeDescriptor",
    # Scalars
    "ScalarHandler",
    "ScalarRegistry",
    "SimpleScalar",
    # Hooks
    "PreGenerateHook",
    "PostGenerateHook",
    "AddHeaderHook",
    "FilterTypesHook",
    "HookRunner",
    # IR types
    "Declaration",
    "IREnum",
    "IRInputField",
    "IRInputType",
    "IROperation",
    "IRSchema",
    "IRTypeRef",
    # Loaders
    "SchemaParser",
    "load_snapshot",
    "load_snapshot_data",
    # Compiler
    "NullKind",
    "ReferenceKind",
    "ScalarKind",
    "classify",
    "compile_field",
    # Generator
    "DeclarationSection",
    "ValidatorGenerator",
    "ModuleWriter",
]
