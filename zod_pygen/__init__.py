"""Generate zod validators from schema metadata."""

__version__ = "0.1.0"
