from envkit.core.hooks.registry import DuplicateHookError, build_registry
from envkit.core.hooks.types import HookDefaults, HookSpec, RustToolchain

__all__ = [
    "DuplicateHookError",
    "HookDefaults",
    "HookSpec",
    "RustToolchain",
    "build_registry",
]
