"""Tests for rendering declarations into a TypeScript module."""

import pytest

from zod_pygen.core.config import GeneratorConfig
from zod_pygen.core.generator import DeclarationSection
from zod_pygen.core.hooks import AddHeaderHook, HookRunner
from zod_pygen.core.ir import Declaration
from zod_pygen.core.writer import ModuleWriter, heading


@pytest.fixture
def sections():
    return [
        DeclarationSection(
            "ENUMS",
            [Declaration("SortOrder", "z.nativeEnum(Prisma.Prisma.SortOrder)", kind="enum")],
        ),
        DeclarationSection(
            "INPUT TYPES",
            [
                Declaration(
                    "UserWhereInput",
                    "z.object({\n  email: z.string(),\n}).strict()",
                    type_annotation="z.ZodType<Prisma.Prisma.UserWhereInput>",
                ),
            ],
        ),
        DeclarationSection("ARGS", []),
    ]


class TestHeading:
    def test_three_line_banner(self):
        rule = "/" * 49
        assert heading("ENUMS") == f"{rule}\n// ENUMS\n{rule}"


class TestModuleWriter:
    """Tests for ModuleWriter."""

    def test_imports_first(self, sections):
        content = ModuleWriter().render(sections)
        assert content.startswith(
            "import { z } from 'zod';\nimport { Prisma } from '@prisma/client';\n"
        )

    def test_declarations(self, sections):
        content = ModuleWriter().render(sections)
        assert "\nexport const SortOrder = z.nativeEnum(Prisma.Prisma.SortOrder);\n" in content
        assert (
            "\nexport const UserWhereInput: z.ZodType<Prisma.Prisma.UserWhereInput> = z.object({\n"
            "  email: z.string(),\n"
            "}).strict();\n"
        ) in content

    def test_text_is_not_escaped(self, sections):
        sections[1].declarations.append(
            Declaration("PostWhereInput", "z.object({\n  author: z.lazy(() => UserWhereInput),\n}).strict()")
        )
        content = ModuleWriter().render(sections)
        assert "z.lazy(() => UserWhereInput)" in content

    def test_banners_in_order(self, sections):
        content = ModuleWriter().render(sections)
        positions = [content.index(f"// {title}\n") for title in ("ENUMS", "INPUT TYPES", "ARGS")]
        assert positions == sorted(positions)
        assert content.index("SortOrder") < content.index("UserWhereInput")

    def test_custom_imports(self, sections):
        config = GeneratorConfig(client_import="import { Prisma } from './client';")
        content = ModuleWriter(config).render(sections)
        assert "import { Prisma } from './client';\n" in content

    def test_post_hooks(self, sections):
        hooks = HookRunner()
        hooks.add_post_hook(AddHeaderHook("// Generated by zod-pygen"))
        content = ModuleWriter(hooks=hooks).render(sections)
        assert content.startswith("// Generated by zod-pygen\n\nimport { z } from 'zod';")

    def test_custom_template_dir(self, tmp_path, sections):
        (tmp_path / "validators.ts.j2").write_text(
            "{% for section in sections %}{{ section.title }};{% endfor %}"
        )
        content = ModuleWriter(GeneratorConfig(template_dir=str(tmp_path))).render(sections)
        assert content == "ENUMS;INPUT TYPES;ARGS;"

    def test_missing_template_dir_falls_back(self, tmp_path, sections):
        config = GeneratorConfig(template_dir=str(tmp_path / "missing"))
        content = ModuleWriter(config).render(sections)
        assert "// ENUMS" in content

    def test_write_creates_parent_dirs(self, tmp_path, sections):
        output = tmp_path / "src" / "generated" / "validators.ts"
        path = ModuleWriter().write(sections, output)
        assert path == output
        assert "export const SortOrder" in output.read_text()
