"""Hooks around validator generation.

Pre-generation hooks see the IR before any declaration is compiled, so they
can drop enums, inputs or operations. Post-generation hooks see the rendered
TypeScript module before it is written.

    hooks = HookRunner()
    hooks.add_pre_hook(FilterTypesHook(exclude_suffix="UncheckedCreateInput"))
    hooks.add_post_hook(AddHeaderHook("// Generated by zod-pygen"))
"""

from typing import Protocol, runtime_checkable

from .ir import IRSchema


@runtime_checkable
class PreGenerateHook(Protocol):
    """Receives the IR and returns the IR to generate from."""

    def pre_generate(self, ir: IRSchema) -> IRSchema:
        ...


@runtime_checkable
class PostGenerateHook(Protocol):
    """Receives the output file name and module text; returns new text."""

    def post_generate(self, filename: str, content: str) -> str:
        ...


class AddHeaderHook:
    """Prepends a banner (typically a comment) followed by one blank line."""

    def __init__(self, header: str):
        self.header = header

    def post_generate(self, _filename: str, content: str) -> str:
        separator = "\n" if self.header.endswith("\n") else "\n\n"
        return f"{self.header}{separator}{content}"


class FilterTypesHook:
    """Keeps only the declarations whose names pass every configured rule.

    Enums and input types are matched by name, operations by the name of
    their argument declaration (e.g. "FindManyUserArgs").
    """

    def __init__(
        self,
        exclude_prefix: str | None = None,
        exclude_suffix: str | None = None,
        include_prefix: str | None = None,
        include_suffix: str | None = None,
    ):
        self.exclude_prefix = exclude_prefix
        self.exclude_suffix = exclude_suffix
        self.include_prefix = include_prefix
        self.include_suffix = include_suffix

    def keeps(self, name: str) -> bool:
        if self.exclude_prefix and name.startswith(self.exclude_prefix):
            return False
        if self.exclude_suffix and name.endswith(self.exclude_suffix):
            return False
        if self.include_prefix and not name.startswith(self.include_prefix):
            return False
        if self.include_suffix and not name.endswith(self.include_suffix):
            return False
        return True

    def pre_generate(self, ir: IRSchema) -> IRSchema:
        ir.enums = {k: e for k, e in ir.enums.items() if self.keeps(e.name)}
        ir.inputs = {k: t for k, t in ir.inputs.items() if self.keeps(t.name)}
        ir.queries = [op for op in ir.queries if self.keeps(op.arg_name)]
        ir.mutations = [op for op in ir.mutations if self.keeps(op.arg_name)]
        return ir


class HookRunner:
    """Applies registered hooks in registration order."""

    def __init__(self):
        self.pre_hooks: list[PreGenerateHook] = []
        self.post_hooks: list[PostGenerateHook] = []

    def add_pre_hook(self, hook: PreGenerateHook):
        self.pre_hooks.append(hook)

    def add_post_hook(self, hook: PostGenerateHook):
        self.post_hooks.append(hook)

    def run_pre_hooks(self, ir: IRSchema) -> IRSchema:
        for hook in self.pre_hooks:
            ir = hook.pre_generate(ir)
        return ir

    def run_post_hooks(self, filename: str, content: str) -> str:
        for hook in self.post_hooks:
            content = hook.post_generate(filename, content)
        return content
