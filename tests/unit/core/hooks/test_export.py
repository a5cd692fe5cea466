"""Tests for rendering the registry as a pre-commit config."""

import re
from dataclasses import replace

import yaml

from envkit.core.hooks.export import (
    excludes_to_regex,
    hook_to_pre_commit,
    render_pre_commit_config,
)
from envkit.core.hooks.registry import build_registry
from envkit.core.hooks.types import HookDefaults


def test_excludes_to_regex_empty() -> None:
    assert excludes_to_regex(frozenset()) is None


def test_excludes_to_regex_matches_globs() -> None:
    pattern = excludes_to_regex(frozenset({"vendor/*", "*.lock"}))

    assert pattern is not None
    regex = re.compile(pattern)
    assert regex.search("vendor/lib.c")
    assert regex.search("Cargo.lock")
    assert not regex.search("src/main.rs")


def test_excludes_to_regex_does_not_match_nested_directory() -> None:
    pattern = excludes_to_regex(frozenset({"vendor/*"}))

    assert pattern is not None
    regex = re.compile(pattern)
    assert regex.search("vendor/lib.c")
    assert not regex.search("src/vendor/lib.c")
    assert not regex.search("third_party/vendor/x/y.c")


def test_hook_to_pre_commit_fields() -> None:
    spec = build_registry(HookDefaults())["bazel-buildifier-lint"]

    entry = hook_to_pre_commit(spec)

    assert entry == {
        "id": "bazel-buildifier-lint",
        "name": "buildifier lint",
        "entry": "buildifier -lint=warn",
        "language": "system",
        "description": "Lint Starlark",
        "types": ["bazel"],
    }


def test_hook_without_types_or_description_omits_keys() -> None:
    spec = build_registry(HookDefaults())["fix-byte-order-marker"]

    entry = hook_to_pre_commit(spec)

    assert "types" not in entry
    assert "description" not in entry
    assert "exclude" not in entry


def test_render_skips_disabled_hooks() -> None:
    registry = dict(build_registry(HookDefaults()))
    registry["hadolint"] = replace(registry["hadolint"], enabled=False)

    document = yaml.safe_load(render_pre_commit_config(registry))

    hook_ids = [hook["id"] for hook in document["repos"][0]["hooks"]]
    assert "hadolint" not in hook_ids
    assert "forbid-binary-files" in hook_ids
    assert len(hook_ids) == len(registry) - 1


def test_render_is_local_repo_with_excludes() -> None:
    registry = build_registry(HookDefaults(excludes=frozenset({"third_party/*"})))

    document = yaml.safe_load(render_pre_commit_config(registry))

    repo = document["repos"][0]
    assert repo["repo"] == "local"
    by_id = {hook["id"]: hook for hook in repo["hooks"]}
    assert re.search(by_id["statix"]["exclude"], "third_party/x.nix")
    assert not re.search(by_id["statix"]["exclude"], "nix/third_party/x.nix")
    assert "exclude" not in by_id["forbid-binary-files"]
