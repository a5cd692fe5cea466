"""Layer repository hook settings over a built registry."""

from collections.abc import Mapping
from dataclasses import replace
from types import MappingProxyType

from envkit.core.hooks.types import HookSpec
from envkit.core.repo_config import HookSettings


class UnknownHookError(ValueError):
    """Raised when configuration names a hook that is not in the registry."""

    def __init__(self, hook_id: str, known: list[str]) -> None:
        super().__init__(f"Unknown hook '{hook_id}'. Known hooks: {', '.join(known)}")
        self.hook_id = hook_id


def apply_overrides(
    registry: Mapping[str, HookSpec], overrides: Mapping[str, HookSettings]
) -> Mapping[str, HookSpec]:
    """Return a new registry with per-hook enable/excludes settings applied.

    The input registry is left untouched.

    Raises:
        UnknownHookError: If a setting names a hook id missing from the registry
    """
    for hook_id in overrides:
        if hook_id not in registry:
            raise UnknownHookError(hook_id, sorted(registry))

    result: dict[str, HookSpec] = {}
    for hook_id, spec in registry.items():
        settings = overrides.get(hook_id)
        if settings is None:
            result[hook_id] = spec
            continue

        enabled = spec.enabled if settings.enable is None else settings.enable
        excludes = spec.excludes if settings.excludes is None else frozenset(settings.excludes)
        result[hook_id] = replace(spec, enabled=enabled, excludes=excludes)

    return MappingProxyType(result)
