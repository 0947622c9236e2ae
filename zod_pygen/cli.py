"""Command-line interface for zod-pygen."""

import logging
from pathlib import Path

import click

from . import __version__
from .core.config import GeneratorConfig
from .core.errors import GenerationError
from .core.generator import ValidatorGenerator
from .core.hooks import AddHeaderHook, HookRunner
from .core.parser import SchemaParser
from .core.snapshot import load_snapshot
from .core.writer import ModuleWriter


def parse_scalar_options(values: tuple[str, ...]) -> dict[str, str]:
    """Turn repeated NAME=ZODTYPE options into a mapping."""
    scalars = {}
    for value in values:
        name, sep, zod_type = value.partition("=")
        if not sep or not name or not zod_type:
            raise click.BadParameter(
                f"Expected NAME=ZODTYPE, got {value!r}", param_hint="--scalar"
            )
        scalars[name.strip()] = zod_type.strip()
    return scalars


@click.group()
@click.version_option(version=__version__)
def main():
    """Zod validator generator.

    Generate zod validators from GraphQL schemas or metadata snapshots.
    """
    pass


@main.command()
@click.option(
    "--schema",
    "-s",
    required=True,
    type=click.Path(exists=True),
    help="Path to a GraphQL schema file or directory, or a JSON metadata snapshot.",
)
@click.option(
    "--output",
    "-o",
    required=True,
    type=click.Path(),
    help="Output file for the generated validators (e.g., validators.ts).",
)
@click.option(
    "--template-dir",
    type=click.Path(exists=True, file_okay=False),
    help="Directory with a custom validators.ts.j2 template.",
)
@click.option(
    "--header",
    help="Text to prepend to the generated file.",
)
@click.option(
    "--scalar",
    "scalars",
    multiple=True,
    help="Map a custom scalar onto a zod constructor, e.g. Email=string.",
)
@click.option(
    "--schema-namespace",
    default="Prisma.Prisma",
    show_default=True,
    help="Namespace of the schema's native types and enums.",
)
@click.option(
    "--model-namespace",
    default="Prisma",
    show_default=True,
    help="Namespace of the data model's enums.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def generate(
    schema: str,
    output: str,
    template_dir: str | None,
    header: str | None,
    scalars: tuple[str, ...],
    schema_namespace: str,
    model_namespace: str,
    verbose: bool,
):
    """Generate zod validators from a schema.

    Examples:

        zod-pygen generate --schema ./schema --output ./validators.ts

        zod-pygen generate -s ./dmmf.json -o ./src/validators.ts --scalar Email=string
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    schema_path = Path(schema).resolve()
    output_path = Path(output).resolve()

    config = GeneratorConfig(
        schema_namespace=schema_namespace,
        model_namespace=model_namespace,
        template_dir=template_dir,
        scalars=parse_scalar_options(scalars),
    )
    hooks = HookRunner()
    if header:
        hooks.add_post_hook(AddHeaderHook(header))

    if verbose:
        click.echo(f"Schema: {schema_path}")
        click.echo(f"Output: {output_path}")

    try:
        click.echo("Parsing schema...")
        if schema_path.suffix == ".json":
            ir = load_snapshot(schema_path)
        else:
            ir = SchemaParser(str(schema_path)).parse_all()

        if verbose:
            click.echo(f"  Enums: {len(ir.enums)}")
            click.echo(f"  Inputs: {len(ir.inputs)}")
            click.echo(f"  Queries: {len(ir.queries)}")
            click.echo(f"  Mutations: {len(ir.mutations)}")

        click.echo("Generating validators...")
        generator = ValidatorGenerator(ir, config=config, hooks=hooks)
        sections = generator.generate_sections()
        path = ModuleWriter(config, hooks).write(sections, output_path)
    except GenerationError as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"Done! Generated validators in {path}")


if __name__ == "__main__":
    main()
