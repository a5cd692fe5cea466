"""Static hook table and registry construction.

The registry is a mapping, not a pipeline: entries have no ordering,
dependency or conflict semantics. The hook runner decides when and how to
invoke each entry.
"""

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from envkit.core.hooks.types import HookDeclaration, HookDefaults, HookSpec

logger = logging.getLogger(__name__)

FORBID_BINARY_FILES_ENTRY = "forbid-binary-files"


class DuplicateHookError(ValueError):
    """Raised when the static hook table declares the same id twice."""

    def __init__(self, hook_id: str) -> None:
        super().__init__(f"Duplicate hook id in hook table: {hook_id}")
        self.hook_id = hook_id


def _pre_commit_hooks(defaults: HookDefaults) -> list[HookDeclaration]:
    """Checks shipped by the pre-commit-hooks suite."""

    def entry(binary: str) -> str:
        return _tool_path(defaults, binary)

    return [
        HookDeclaration(
            id="trailing-whitespace-fixer",
            name="trailing-whitespace",
            description="Remove trailing whitespace",
            entry=entry("trailing-whitespace-fixer"),
            types=frozenset({"text"}),
        ),
        HookDeclaration(
            id="end-of-file-fixer",
            name="end-of-file-fixer",
            description="Make sure files end in a newline and only a newline",
            entry=entry("end-of-file-fixer"),
            types=frozenset({"text"}),
        ),
        HookDeclaration(
            id="fix-byte-order-marker",
            name="fix-byte-order-marker",
            entry=entry("fix-byte-order-marker"),
        ),
        HookDeclaration(
            id="mixed-line-ending",
            name="mixed-line-ending",
            entry=entry("mixed-line-ending"),
            types=frozenset({"text"}),
        ),
        HookDeclaration(
            id="check-case-conflict",
            name="check-case-conflict",
            entry=entry("check-case-conflict"),
            types=frozenset({"text"}),
        ),
        HookDeclaration(
            id="detect-private-key",
            name="detect-private-key",
            entry=entry("detect-private-key"),
            types=frozenset({"text"}),
        ),
    ]


def _language_hooks(defaults: HookDefaults) -> list[HookDeclaration]:
    """Formatters and linters for the languages in the tree."""
    buildifier = _tool_path(defaults, "buildifier")

    def nix_hook(hook_id: str) -> HookDeclaration:
        return HookDeclaration(
            id=hook_id, entry=_tool_path(defaults, hook_id), types=frozenset({"nix"})
        )

    return [
        # Dockerfile
        HookDeclaration(
            id="hadolint",
            entry=_tool_path(defaults, "hadolint"),
            types=frozenset({"dockerfile"}),
        ),
        # Nix
        nix_hook("alejandra"),
        nix_hook("statix"),
        nix_hook("deadnix"),
        # Rust
        HookDeclaration(
            id="rustfmt",
            entry=f"{defaults.nightly_rust.cargo} fmt -- --color always",
            types=frozenset({"rust"}),
            package_overrides={
                "cargo": defaults.nightly_rust.cargo,
                "rustfmt": defaults.nightly_rust.rustfmt,
            },
        ),
        # Starlark
        HookDeclaration(
            id="bazel-buildifier-format",
            name="buildifier format",
            description="Format Starlark",
            entry=f"{buildifier} -lint=fix",
            types=frozenset({"bazel"}),
        ),
        HookDeclaration(
            id="bazel-buildifier-lint",
            name="buildifier lint",
            description="Lint Starlark",
            entry=f"{buildifier} -lint=warn",
            types=frozenset({"bazel"}),
        ),
    ]


def _synthesized_hooks() -> list[HookDeclaration]:
    """Hooks whose entry point is provided by envkit itself."""
    return [
        HookDeclaration(
            id="forbid-binary-files",
            name="forbid-binary-files",
            description="Reject binary files",
            entry=FORBID_BINARY_FILES_ENTRY,
            types=frozenset({"binary"}),
            excludes=frozenset(),
        ),
    ]


def _tool_path(defaults: HookDefaults, binary: str) -> str:
    if not defaults.tools_prefix:
        return binary
    return f"{defaults.tools_prefix.rstrip('/')}/{binary}"


def hook_declarations(defaults: HookDefaults) -> list[HookDeclaration]:
    """Return the static hook table for the given defaults."""
    return [
        *_pre_commit_hooks(defaults),
        *_synthesized_hooks(),
        *_language_hooks(defaults),
    ]


def resolve_declaration(declaration: HookDeclaration, defaults: HookDefaults) -> HookSpec:
    """Merge a table row over the defaults into a complete HookSpec."""
    excludes = defaults.excludes if declaration.excludes is None else declaration.excludes
    return HookSpec(
        id=declaration.id,
        enabled=declaration.enabled,
        name=declaration.name if declaration.name is not None else declaration.id,
        description=declaration.description,
        types=declaration.types,
        excludes=excludes,
        entry=declaration.entry,
        package_overrides=declaration.package_overrides,
    )


def build_registry_from(
    declarations: Iterable[HookDeclaration], defaults: HookDefaults
) -> Mapping[str, HookSpec]:
    """Build a read-only registry from an arbitrary hook table.

    Raises:
        DuplicateHookError: If two rows share an id
    """
    registry: dict[str, HookSpec] = {}
    for declaration in declarations:
        if declaration.id in registry:
            raise DuplicateHookError(declaration.id)
        registry[declaration.id] = resolve_declaration(declaration, defaults)

    logger.debug(
        "Built hook registry: %d hooks, default excludes=%s",
        len(registry),
        sorted(defaults.excludes),
    )
    return MappingProxyType(registry)


def build_registry(defaults: HookDefaults) -> Mapping[str, HookSpec]:
    """Build the complete hook registry.

    Args:
        defaults: Defaults merged into every entry that does not override them

    Returns:
        Read-only mapping from hook id to HookSpec

    Raises:
        DuplicateHookError: If the static hook table is malformed
    """
    return build_registry_from(hook_declarations(defaults), defaults)
