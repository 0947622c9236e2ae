"""Exceptions raised while loading schema metadata or generating validators."""


class GenerationError(Exception):
    """Base class for errors that abort a generation run."""


class UnrecognizedTypeDescriptor(GenerationError):
    """Raised when a candidate type is neither a scalar, a reference nor null.

    declared marks a scalar the schema declares but no zod type is
    registered for.
    """

    def __init__(
        self,
        type_name: str,
        location: str,
        owner: str | None = None,
        field: str | None = None,
        declared: bool = False,
    ):
        self.type_name = type_name
        self.location = location
        self.owner = owner
        self.field = field
        self.declared = declared
        where = ""
        if owner and field:
            where = f" in {owner}.{field}"
        elif field:
            where = f" in field {field}"
        if declared:
            message = (
                f"Declared scalar {type_name!r}{where} has no zod mapping; "
                f"register one with --scalar {type_name}=<zodType>"
            )
        else:
            message = f"Cannot classify type {type_name!r} (location {location!r}){where}"
        super().__init__(message)

    def with_context(self, owner: str | None, field: str) -> "UnrecognizedTypeDescriptor":
        """Return a copy of this error that names the offending field."""
        return UnrecognizedTypeDescriptor(
            self.type_name, self.location, owner, field, self.declared
        )

    def as_declared(self) -> "UnrecognizedTypeDescriptor":
        """Return a copy of this error for a scalar the schema declares."""
        return UnrecognizedTypeDescriptor(
            self.type_name, self.location, self.owner, self.field, declared=True
        )


class MissingCandidateTypes(GenerationError):
    """Raised when a field has no candidate type other than null."""

    def __init__(self, owner: str | None, field: str):
        self.owner = owner
        self.field = field
        name = f"{owner}.{field}" if owner else field
        super().__init__(f"Field {name} has no non-null candidate types")


class SchemaParseError(GenerationError):
    """Raised when a GraphQL schema file cannot be parsed."""

    def __init__(self, file_name: str, message: str):
        self.file_name = file_name
        super().__init__(f"Error parsing {file_name}: {message}")


class SnapshotError(GenerationError):
    """Raised when a JSON metadata snapshot is malformed."""
