"""Module writer for generated declarations.

Renders Jinja2 templates to produce a TypeScript module from declarations.

Supports custom templates via GeneratorConfig.template_dir:
    writer = ModuleWriter(GeneratorConfig(template_dir="./my_templates"))

Template lookup order:
1. User's template directory (if provided)
2. Package default templates
"""

import logging
from pathlib import Path

from jinja2 import ChoiceLoader, Environment, FileSystemLoader, PackageLoader, select_autoescape

from .config import GeneratorConfig
from .generator import DeclarationSection
from .hooks import HookRunner

logger = logging.getLogger(__name__)

HEADING_RULE = "/" * 49


def heading(title: str) -> str:
    """Render a three-line banner comment."""
    return f"{HEADING_RULE}\n// {title}\n{HEADING_RULE}"


class ModuleWriter:
    """Renders declaration sections into a single TypeScript module.

    Available templates to override:
        - validators.ts.j2 — the complete module
    """

    TEMPLATE_NAME = "validators.ts.j2"

    def __init__(self, config: GeneratorConfig | None = None, hooks: HookRunner | None = None):
        self.config = config or GeneratorConfig()
        self.hooks = hooks or HookRunner()

        # Build template loader - custom templates take precedence
        loaders = []
        if self.config.template_dir:
            template_path = Path(self.config.template_dir)
            if template_path.is_dir():
                loaders.append(FileSystemLoader(str(template_path)))
        loaders.append(PackageLoader("zod_pygen", "templates"))

        self.env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=select_autoescape(),
            trim_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.filters["heading"] = heading

    def render(self, sections: list[DeclarationSection], filename: str = "validators.ts") -> str:
        """Render the module and run post-generation hooks on it."""
        template = self.env.get_template(self.TEMPLATE_NAME)
        content = template.render(
            zod_import=self.config.zod_import,
            client_import=self.config.client_import,
            sections=sections,
        )
        return self.hooks.run_post_hooks(filename, content)

    def write(self, sections: list[DeclarationSection], output_path: str | Path) -> Path:
        """Render the module and write it to output_path."""
        path = Path(output_path)
        content = self.render(sections, filename=path.name)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            f.write(content)
        logger.info("Wrote %s", path)
        return path
