"""Render a hook registry as a pre-commit configuration document."""

import fnmatch
from collections.abc import Mapping
from typing import Any

import yaml

from envkit.core.hooks.types import HookSpec


def excludes_to_regex(excludes: frozenset[str]) -> str | None:
    """Translate glob excludes into the single regex pre-commit expects.

    Returns None when there is nothing to exclude.
    """
    if not excludes:
        return None
    # pre-commit applies exclude with re.search, so every alternative needs a start anchor
    return "|".join(f"^{fnmatch.translate(pattern)}" for pattern in sorted(excludes))


def hook_to_pre_commit(spec: HookSpec) -> dict[str, Any]:
    """Convert one HookSpec into a pre-commit `repo: local` hook entry."""
    entry: dict[str, Any] = {
        "id": spec.id,
        "name": spec.name,
        "entry": spec.entry,
        "language": "system",
    }
    if spec.description:
        entry["description"] = spec.description
    if spec.types:
        entry["types"] = sorted(spec.types)
    exclude = excludes_to_regex(spec.excludes)
    if exclude is not None:
        entry["exclude"] = exclude
    return entry


def render_pre_commit_config(registry: Mapping[str, HookSpec]) -> str:
    """Render enabled hooks as .pre-commit-config.yaml content.

    Disabled hooks are left out. Hook order follows the registry's
    iteration order and carries no meaning.
    """
    hooks = [hook_to_pre_commit(spec) for spec in registry.values() if spec.enabled]
    document = {"repos": [{"repo": "local", "hooks": hooks}]}
    return yaml.safe_dump(document, sort_keys=False, default_flow_style=False)
