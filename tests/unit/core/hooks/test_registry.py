"""Tests for hook registry construction."""

import pytest

from envkit.core.hooks.registry import (
    FORBID_BINARY_FILES_ENTRY,
    DuplicateHookError,
    build_registry,
    build_registry_from,
)
from envkit.core.hooks.types import HookDeclaration, HookDefaults, RustToolchain

EXPECTED_IDS = {
    "trailing-whitespace-fixer",
    "end-of-file-fixer",
    "fix-byte-order-marker",
    "mixed-line-ending",
    "check-case-conflict",
    "detect-private-key",
    "forbid-binary-files",
    "hadolint",
    "alejandra",
    "statix",
    "deadnix",
    "rustfmt",
    "bazel-buildifier-format",
    "bazel-buildifier-lint",
}


@pytest.mark.parametrize(
    "defaults",
    [
        HookDefaults(),
        HookDefaults(excludes=frozenset({"third_party/**"})),
        HookDefaults(excludes=frozenset({"a/*", "b/*"}), tools_prefix="/opt/tools/bin"),
    ],
)
def test_registry_keys_are_declared_ids(defaults: HookDefaults) -> None:
    """Keys are exactly the statically declared ids regardless of defaults."""
    registry = build_registry(defaults)

    assert set(registry) == EXPECTED_IDS
    assert len(registry) == len(EXPECTED_IDS)


def test_every_hook_is_enabled_by_default() -> None:
    registry = build_registry(HookDefaults())

    assert all(spec.enabled for spec in registry.values())


def test_default_excludes_apply_to_hooks_without_override() -> None:
    """Hooks that do not override excludes inherit the defaults."""
    defaults = HookDefaults(excludes=frozenset({"vendor/**", "*.lock"}))
    registry = build_registry(defaults)

    inheriting = [spec for hook_id, spec in registry.items() if hook_id != "forbid-binary-files"]
    assert inheriting
    for spec in inheriting:
        assert spec.excludes == defaults.excludes, spec.id


def test_forbid_binary_files_overrides_excludes_with_empty_set() -> None:
    registry = build_registry(HookDefaults(excludes=frozenset({"vendor/**"})))

    assert registry["forbid-binary-files"].excludes == frozenset()


def test_forbid_binary_files_is_a_regular_entry() -> None:
    """The synthesized hook is registered like any other entry point."""
    spec = build_registry(HookDefaults())["forbid-binary-files"]

    assert spec.entry == FORBID_BINARY_FILES_ENTRY
    assert spec.types == frozenset({"binary"})
    assert spec.enabled is True


def test_name_defaults_to_id() -> None:
    registry = build_registry(HookDefaults())

    assert registry["hadolint"].name == "hadolint"
    assert registry["trailing-whitespace-fixer"].name == "trailing-whitespace"


def test_text_type_filter() -> None:
    registry = build_registry(HookDefaults())

    assert registry["trailing-whitespace-fixer"].types == frozenset({"text"})
    assert registry["fix-byte-order-marker"].types == frozenset()


def test_buildifier_entries() -> None:
    registry = build_registry(HookDefaults())

    assert registry["bazel-buildifier-format"].entry == "buildifier -lint=fix"
    assert registry["bazel-buildifier-lint"].entry == "buildifier -lint=warn"
    assert registry["bazel-buildifier-format"].name == "buildifier format"
    assert registry["bazel-buildifier-lint"].types == frozenset({"bazel"})


def test_tools_prefix_is_prepended_to_declarative_entries() -> None:
    registry = build_registry(HookDefaults(tools_prefix="/opt/tools/bin/"))

    assert registry["detect-private-key"].entry == "/opt/tools/bin/detect-private-key"
    assert registry["bazel-buildifier-lint"].entry == "/opt/tools/bin/buildifier -lint=warn"
    # The synthesized entry point is not a prefixed tool
    assert registry["forbid-binary-files"].entry == FORBID_BINARY_FILES_ENTRY


def test_rustfmt_uses_nightly_rust_overrides() -> None:
    nightly = RustToolchain(cargo="/nightly/bin/cargo", rustfmt="/nightly/bin/rustfmt")
    spec = build_registry(HookDefaults(nightly_rust=nightly))["rustfmt"]

    assert dict(spec.package_overrides) == {
        "cargo": "/nightly/bin/cargo",
        "rustfmt": "/nightly/bin/rustfmt",
    }
    assert spec.entry.startswith("/nightly/bin/cargo fmt")


def test_rustfmt_entry_formats_without_workspace_flag() -> None:
    spec = build_registry(HookDefaults())["rustfmt"]

    assert spec.entry == "cargo +nightly fmt -- --color always"
    assert "--all" not in spec.entry.split()


def test_other_hooks_have_no_package_overrides() -> None:
    registry = build_registry(HookDefaults())

    for hook_id, spec in registry.items():
        if hook_id != "rustfmt":
            assert dict(spec.package_overrides) == {}, hook_id


def test_registry_is_read_only() -> None:
    registry = build_registry(HookDefaults())

    with pytest.raises(TypeError):
        registry["new"] = registry["hadolint"]  # type: ignore[index]


def test_hook_spec_is_frozen() -> None:
    spec = build_registry(HookDefaults())["hadolint"]

    with pytest.raises(AttributeError):
        spec.enabled = False  # type: ignore[misc]


def test_package_overrides_cannot_be_mutated() -> None:
    spec = build_registry(HookDefaults())["rustfmt"]

    with pytest.raises(TypeError):
        spec.package_overrides["cargo"] = "other"  # type: ignore[index]


def test_building_twice_gives_equal_registries() -> None:
    defaults = HookDefaults(excludes=frozenset({"vendor/**"}))

    assert dict(build_registry(defaults)) == dict(build_registry(defaults))


def test_duplicate_id_is_rejected() -> None:
    table = [
        HookDeclaration(id="fmt", entry="fmt-a"),
        HookDeclaration(id="fmt", entry="fmt-b"),
    ]

    with pytest.raises(DuplicateHookError) as exc_info:
        build_registry_from(table, HookDefaults())

    assert exc_info.value.hook_id == "fmt"
    assert "fmt" in str(exc_info.value)


def test_duplicate_hook_error_is_value_error() -> None:
    assert issubclass(DuplicateHookError, ValueError)
