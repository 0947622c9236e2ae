"""Generator configuration."""

from dataclasses import dataclass, field


@dataclass
class GeneratorConfig:
    """Options that control the emitted TypeScript module.

    Attributes:
        zod_import: Import line for the zod runtime
        client_import: Import line for the generated schema client types
        schema_namespace: Namespace holding the schema's native types and enums
        model_namespace: Namespace holding the data model's enums
        template_dir: Optional directory with a custom validators.ts.j2
        scalars: Extra scalar name -> zod constructor mappings
    """
    zod_import: str = "import { z } from 'zod';"
    client_import: str = "import { Prisma } from '@prisma/client';"
    schema_namespace: str = "Prisma.Prisma"
    model_namespace: str = "Prisma"
    template_dir: str | None = None
    scalars: dict[str, str] = field(default_factory=dict)

    def type_annotation(self, name: str) -> str:
        """Type annotation for an object declaration named after a schema type."""
        return f"z.ZodType<{self.schema_namespace}.{name}>"
